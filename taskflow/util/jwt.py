"""JWT token utilities."""

from datetime import datetime, timezone

import jwt
from pydantic import BaseModel, ValidationError

from taskflow.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    iat: datetime
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


class InvalidTokenError(JWTError):
    """Token is malformed, has a bad signature or lacks required claims."""

    pass


class ExpiredTokenError(JWTError):
    """Token signature is valid but the token has expired."""

    pass


def create_token(
    user_id: str, settings: AuthSettings, issued_at: datetime | None = None
) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID
        settings: Authentication settings
        issued_at: Issue instant (defaults to now, UTC)

    Returns:
        Encoded JWT token
    """
    issued_at = issued_at or datetime.now(timezone.utc)

    payload = {
        "user_id": user_id,
        "iat": issued_at,
        "exp": issued_at + settings.jwt_ttl,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        ExpiredTokenError: If token has expired
        InvalidTokenError: If token is malformed or the signature is wrong
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "iat", "user_id"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError("Token expired")
    except (jwt.InvalidTokenError, ValidationError):
        raise InvalidTokenError("Invalid token")
