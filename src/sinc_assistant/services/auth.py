from __future__ import annotations

import logging
from dataclasses import dataclass

from .context import ServiceContext

logger = logging.getLogger(__name__)


class AuthenticationError(RuntimeError):
    """Raised when an access token cannot be resolved to a user."""


@dataclass(slots=True)
class AuthService:
    context: ServiceContext

    def resolve_user_id(self, access_token: str) -> str:
        if not access_token:
            raise AuthenticationError("Missing access token.")
        try:
            response = self.context.gateway.ensure_client().auth.get_user(access_token)
        except Exception as exc:  # noqa: BLE001
            logger.info("Access token rejected: %s", exc)
            raise AuthenticationError("Invalid access token.") from exc
        user = getattr(response, "user", None)
        identifier = getattr(user, "id", None)
        if not identifier:
            raise AuthenticationError("Access token has no user id.")
        return str(identifier)
