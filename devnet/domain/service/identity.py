"""Identity provider port.

The identity provider owns user accounts. Its user API is the fallback
source of author display data for users missing from the local table.
"""

from abc import ABC, abstractmethod

from devnet.domain.value import ProviderUser


class IdentityProviderClient(ABC):
    """Abstract client for the identity provider's user API."""

    @abstractmethod
    async def get_user(self, user_id: str) -> ProviderUser | None:
        """Fetch a user profile.

        Args:
            user_id: Provider subject ID

        Returns:
            The profile, or None if the provider does not know the ID

        Raises:
            ProviderError: If the provider cannot be reached or errors
        """
        pass
