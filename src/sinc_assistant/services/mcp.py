from __future__ import annotations

import logging

from fastmcp import FastMCP

from ..api import get_api_functions

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Sinc assistant tools: classify calendar requests, extract event drafts from Czech or English text, "
    "and compute free days and free meeting slots from a supplied list of events."
)


def build_mcp_server() -> FastMCP:
    server = FastMCP(name="sinc-assistant", instructions=INSTRUCTIONS)
    for api_function in get_api_functions():
        logger.debug("Registering MCP tool: %s", api_function.name)
        server.tool(
            api_function.func,
            name=api_function.name,
            description=api_function.description,
            tags=set(api_function.tags),
        )
    return server


def run_mcp_server(host: str = "127.0.0.1", port: int = 8765) -> None:
    import asyncio

    asyncio.run(build_mcp_server().run_streamable_http_async(host=host, port=port))
