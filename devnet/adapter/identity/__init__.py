"""Identity provider adapter."""

from .client import (
    IdentityProviderError,
    MockIdentityProviderClient,
    RealIdentityProviderClient,
    parse_provider_user,
)

__all__ = [
    "IdentityProviderError",
    "MockIdentityProviderClient",
    "RealIdentityProviderClient",
    "parse_provider_user",
]
