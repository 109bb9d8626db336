"""Bearer token verification.

Tokens are minted by the external identity provider. The service never
issues tokens of its own; it checks the signature and expiry and reads the
``sub`` claim as the user ID.
"""

from datetime import datetime

import jwt
from pydantic import BaseModel

from devnet.config import AuthSettings


class TokenPayload(BaseModel):
    """Verified token claims."""

    sub: str
    exp: datetime | None = None
    sid: str | None = None  # Provider session ID, informational


class JWTError(Exception):
    """JWT-related error."""

    pass


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a bearer token.

    Args:
        token: Encoded JWT
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    options = {"require": ["sub"], "verify_aud": settings.audience is not None}
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.audience,
            issuer=settings.issuer,
            leeway=settings.leeway,
            options=options,
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
