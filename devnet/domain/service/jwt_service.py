"""JWT token domain service."""

import logfire

from devnet.config import AuthSettings
from devnet.util.jwt import TokenPayload, bearer_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for verifying identity-provider tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.sub)
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_user_id_from_header(self, authorization: str | None) -> str | None:
        """Extract user ID from an Authorization header without raising.

        Args:
            authorization: Raw ``Authorization`` header value (optional)

        Returns:
            User ID if a valid bearer token is present, None otherwise
        """
        token = bearer_token(authorization)
        if not token:
            return None

        try:
            return self.verify_token(token).sub
        except Exception as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
