"""Access token domain service."""

from uuid import UUID

import logfire

from debatify.config import AuthSettings
from debatify.domain.value import UserId
from debatify.util.jwt import JWTError, decode_access_token, encode_access_token

from .base import Service


class JWTService(Service):
    """Issues bearer tokens at login and maps them back to users."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def issue(self, user_id: UserId) -> str:
        """Sign a fresh access token for the user."""
        token = encode_access_token(str(user_id), self.auth_settings)
        logfire.info(
            "Access token issued",
            user_id=str(user_id),
            expiry_days=self.auth_settings.jwt_expiry_days,
        )
        return token

    def resolve(self, token: str) -> UserId:
        """Return the user a token was issued to.

        Raises:
            JWTError: Token is invalid, expired, or its subject is not a user id
        """
        with logfire.span("jwt_service.resolve"):
            try:
                claims = decode_access_token(token, self.auth_settings)
                return UserId(UUID(claims.sub))
            except ValueError as e:
                logfire.warn("Access token has a malformed subject")
                raise JWTError("Invalid token subject") from e
            except JWTError as e:
                logfire.warn("Access token rejected", error=str(e))
                raise
