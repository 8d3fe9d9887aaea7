"""Application services orchestrating data access and the assistant."""

from __future__ import annotations

from .assistant import STORE_FAILURE_MESSAGE, AssistantService
from .auth import AuthenticationError, AuthService
from .context import ServiceContext

__all__ = ["AssistantService", "AuthService", "AuthenticationError", "STORE_FAILURE_MESSAGE", "ServiceContext"]
