from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

import orjson

from .config import get_settings
from .domain import CalendarEvent, ConversationMessage
from .llm import AssistantOrchestrator
from .logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sinc assistant command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    api_parser = subparsers.add_parser("api", help="Start the FastAPI server.")
    api_parser.add_argument("--host", default="127.0.0.1")
    api_parser.add_argument("--port", type=int, default=8000)

    mcp_parser = subparsers.add_parser("mcp", help="Start the FastMCP server exposing the assistant tools.")
    mcp_parser.add_argument("--host", default="127.0.0.1")
    mcp_parser.add_argument("--port", type=int, default=8765)

    ask_parser = subparsers.add_parser("ask", help="Answer one message against events from a JSON file.")
    ask_parser.add_argument("text")
    ask_parser.add_argument("--events", type=Path, help="JSON array of event records.")
    ask_parser.add_argument("--history", type=Path, help="JSON array of previous conversation messages.")
    ask_parser.add_argument("--today", type=date.fromisoformat, default=None, help="Reference date, YYYY-MM-DD.")

    return parser


def _load_json_array(path: Optional[Path]) -> List[dict]:
    if path is None:
        return []
    payload = orjson.loads(path.read_bytes())
    if not isinstance(payload, list):
        raise ValueError(f"{path} must contain a JSON array")
    return payload


def run_ask(args: argparse.Namespace) -> bytes:
    events = [CalendarEvent.from_record(record) for record in _load_json_array(args.events)]
    history = [ConversationMessage.from_dict(item) for item in _load_json_array(args.history)]
    orchestrator = AssistantOrchestrator(settings=get_settings())
    response = orchestrator.orchestrate(
        args.text,
        events=events,
        today=args.today or date.today(),
        history=history,
    )
    return orjson.dumps(response.to_dict(), option=orjson.OPT_INDENT_2)


def main(argv: Optional[List[str]] = None) -> None:
    configure_logging()
    logging.getLogger(__name__).info("Sinc assistant CLI starting")
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
    elif args.command == "mcp":
        from .services.mcp import run_mcp_server

        run_mcp_server(host=args.host, port=args.port)
    elif args.command == "ask":
        sys.stdout.write(run_ask(args).decode("utf-8") + "\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
