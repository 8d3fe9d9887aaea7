"""Deterministic assistant functions exposed over HTTP and MCP."""

from __future__ import annotations

from .registry import ApiFunction, call_api, get_api_functions, register_api

# Import endpoints so decorators run at module import time.
from . import endpoints  # noqa: F401

__all__ = ["ApiFunction", "call_api", "get_api_functions", "register_api"]
