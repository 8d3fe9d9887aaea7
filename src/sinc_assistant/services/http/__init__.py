"""HTTP services for the Sinc assistant."""

from .server import app, invoke_api_function, list_api_functions, process_assistant_request, run_local_server

__all__ = [
    "app",
    "invoke_api_function",
    "list_api_functions",
    "process_assistant_request",
    "run_local_server",
]
