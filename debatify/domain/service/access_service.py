"""Access gate.

Resolves the acting user from the Authorization header and guards
private content behind its passcode.
"""

from typing import Optional

import logfire

from debatify.domain.error import (
    AccessDeniedError,
    InvalidCredentialError,
    UnauthenticatedError,
)
from debatify.domain.model import ContentItem
from debatify.domain.value import UserId
from debatify.util.jwt import JWTError

from .base import Service
from .jwt_service import JWTService

BEARER_PREFIX = "Bearer "


class AccessService(Service):
    """Domain service for authentication and passcode checks."""

    def __init__(self, jwt_service: JWTService) -> None:
        self.jwt_service = jwt_service

    def authenticate(self, authorization: Optional[str]) -> UserId:
        """Resolve the actor from an ``Authorization: Bearer <token>`` header.

        Args:
            authorization: Raw header value, or None when absent

        Returns:
            The authenticated user's ID

        Raises:
            UnauthenticatedError: Header missing or not a bearer credential
            InvalidCredentialError: Token has a bad signature or has expired
        """
        if not authorization:
            raise UnauthenticatedError("No token, authorization denied")
        if not authorization.startswith(BEARER_PREFIX):
            raise UnauthenticatedError("Authorization header must be a Bearer token")

        token = authorization[len(BEARER_PREFIX) :].strip()
        if not token:
            raise UnauthenticatedError("No token, authorization denied")

        try:
            return self.jwt_service.resolve(token)
        except JWTError as e:
            raise InvalidCredentialError("Token is not valid") from e

    def optional_actor(self, authorization: Optional[str]) -> Optional[UserId]:
        """Like ``authenticate`` but yields None for any failure."""
        if not authorization:
            return None
        try:
            return self.authenticate(authorization)
        except (UnauthenticatedError, InvalidCredentialError) as e:
            logfire.debug("Treating request as anonymous", reason=str(e))
            return None

    def ensure_readable(self, item: ContentItem, passcode: Optional[str]) -> None:
        """Check the passcode of a private item.

        Public items are always readable. No identity is involved.

        Raises:
            AccessDeniedError: Private item and the passcode is missing or wrong
        """
        if not item.is_private:
            return
        if passcode is None or passcode != item.passcode:
            logfire.warn("Passcode rejected", content_id=str(item.id))
            raise AccessDeniedError("Passcode required or incorrect")
