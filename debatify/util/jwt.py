"""Access token encoding.

Tokens are HS256-signed JWTs whose subject is the user id. They carry no
other identity data, so a renamed or re-verified user keeps working tokens.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import BaseModel

from debatify.config import AuthSettings

_REQUIRED_CLAIMS = ["sub", "exp", "iat"]


class AccessClaims(BaseModel):
    """Decoded claims of an access token."""

    sub: str
    iat: datetime
    exp: datetime


class JWTError(Exception):
    """Token is malformed, forged or expired."""

    pass


def encode_access_token(
    user_id: str, settings: AuthSettings, now: Optional[datetime] = None
) -> str:
    """Sign a token for ``user_id`` valid for ``jwt_expiry_days``."""
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: AuthSettings) -> AccessClaims:
    """Check signature and expiry and return the claims.

    Raises:
        JWTError: Expired, badly signed, or missing a required claim
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": _REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}") from e
    return AccessClaims.model_validate(claims)
