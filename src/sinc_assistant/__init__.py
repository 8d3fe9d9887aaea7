"""Sinc scheduling assistant package."""

from __future__ import annotations

from .assistant import AssistantEngine as AssistantEngine
from .domain import AssistantResponse as AssistantResponse, Intent as Intent

__all__ = ["AssistantEngine", "AssistantResponse", "Intent", "main"]


def main() -> None:
    from .cli import main as cli_main

    cli_main()
