"""Identity provider user API client.

Reads user profiles from the provider's backend API
(``GET {api_url}/users/{user_id}`` with the secret key as bearer token).
"""

from typing import Any

import httpx
import logfire

from devnet.adapter.error import ProviderError
from devnet.domain.service.identity import IdentityProviderClient
from devnet.domain.value import ProviderUser


class IdentityProviderError(ProviderError):
    """Identity provider API error."""

    pass


class RealIdentityProviderClient(IdentityProviderClient):
    """HTTP client for the identity provider's user API."""

    def __init__(
        self,
        api_url: str,
        secret_key: str | None,
        timeout: float = 10.0,
    ) -> None:
        """Initialize identity provider client.

        Args:
            api_url: Base URL of the provider's backend API
            secret_key: Backend API secret, lookups are skipped when None
            timeout: Per-request timeout in seconds
        """
        self.api_url = api_url.rstrip("/")
        self.secret_key = secret_key
        self.timeout = timeout

    async def get_user(self, user_id: str) -> ProviderUser | None:
        """Fetch a user profile from the provider.

        Args:
            user_id: Provider subject ID

        Returns:
            Profile, or None if unknown or lookups are disabled

        Raises:
            IdentityProviderError: If the request fails
        """
        if not self.secret_key:
            logfire.debug("Identity provider lookups disabled", user_id=user_id)
            return None

        url = f"{self.api_url}/users/{user_id}"
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    url,
                    headers={
                        "Authorization": f"Bearer {self.secret_key}",
                        "Accept": "application/json",
                    },
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            raise IdentityProviderError(f"Identity provider request failed: {e}") from e

        if response.status_code == 404:
            return None

        if response.status_code != 200:
            logfire.error(
                "Identity provider returned error",
                user_id=user_id,
                status_code=response.status_code,
                response=response.text[:500],
            )
            raise IdentityProviderError(
                f"Identity provider returned {response.status_code}",
                status_code=response.status_code,
            )

        return parse_provider_user(response.json())


def parse_provider_user(data: dict[str, Any]) -> ProviderUser:
    """Map a provider user payload to a ProviderUser.

    The primary email is the first entry of ``email_addresses``.
    """
    email_addresses = data.get("email_addresses") or []
    email = email_addresses[0].get("email_address") if email_addresses else None

    return ProviderUser(
        id=data["id"],
        first_name=data.get("first_name"),
        last_name=data.get("last_name"),
        username=data.get("username"),
        email=email,
        image_url=data.get("image_url"),
    )


class MockIdentityProviderClient(IdentityProviderClient):
    """In-memory identity provider for testing."""

    def __init__(self) -> None:
        self._users: dict[str, ProviderUser] = {}
        self._failing: set[str] = set()
        self.lookups: list[str] = []

    def add_user(self, user: ProviderUser) -> None:
        """Register a profile the mock will return."""
        self._users[user.id] = user

    def fail_for(self, user_id: str) -> None:
        """Make lookups of ``user_id`` raise like an unreachable provider."""
        self._failing.add(user_id)

    async def get_user(self, user_id: str) -> ProviderUser | None:
        """Return the registered profile, if any."""
        self.lookups.append(user_id)
        if user_id in self._failing:
            raise IdentityProviderError("Mock identity provider failure")
        return self._users.get(user_id)
