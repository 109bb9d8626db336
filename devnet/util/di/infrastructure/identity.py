"""Identity provider infrastructure providers."""

from dishka import Scope, provide
import logfire

from devnet.adapter.identity import RealIdentityProviderClient
from devnet.config import Settings
from devnet.domain.service import IdentityProviderClient
from devnet.util.di.base import ProviderBase


class IdentityProvider(ProviderBase):
    """Identity provider component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity provider client over HTTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_client(self, settings: Settings) -> IdentityProviderClient:
        """Provide identity provider user API client.

        Lookups are disabled (every unknown author becomes the placeholder)
        when no secret key is configured.
        """
        if not settings.identity.secret_key:
            logfire.warn("Identity provider secret key not configured")

        return RealIdentityProviderClient(
            api_url=settings.identity.api_url,
            secret_key=settings.identity.secret_key,
            timeout=settings.identity.timeout_seconds,
        )
