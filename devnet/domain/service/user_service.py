"""User domain service."""

from collections.abc import Iterable

import logfire

from devnet.adapter.error import ProviderError
from devnet.domain.model.user import User
from devnet.domain.repository import UserRepository
from devnet.domain.value import (
    CommentAuthor,
    ProviderUser,
    UserId,
    placeholder_author,
)

from .base import Service
from .identity import IdentityProviderClient


class UserService(Service):
    """Domain service for user lookups and provider sync."""

    def __init__(
        self,
        user_repository: UserRepository,
        identity_client: IdentityProviderClient,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            identity_client: Identity provider user API client
        """
        self.user_repository = user_repository
        self.identity_client = identity_client

    async def resolve_authors(
        self, user_ids: Iterable[UserId]
    ) -> dict[UserId, CommentAuthor]:
        """Resolve display info for a set of comment authors.

        Local users are used first. IDs missing locally are fetched from the
        identity provider and synced into the users table. IDs that neither
        source knows, or that the provider fails on, get the placeholder
        author so a thread always renders.

        Args:
            user_ids: Author IDs, duplicates allowed

        Returns:
            Mapping with an entry for every requested ID
        """
        unique_ids = list(dict.fromkeys(user_ids))
        with logfire.span("user_service.resolve_authors", count=len(unique_ids)):
            authors: dict[UserId, CommentAuthor] = {
                user.id: user.to_author()
                for user in await self.user_repository.find_by_ids(unique_ids)
            }

            missing = [user_id for user_id in unique_ids if user_id not in authors]
            if missing:
                logfire.info(
                    "Resolving authors from identity provider", count=len(missing)
                )

            for user_id in missing:
                user = await self._sync_from_provider(user_id)
                authors[user_id] = (
                    user.to_author() if user else placeholder_author(user_id)
                )

            return authors

    async def ensure_user(self, user_id: UserId) -> User | None:
        """Make sure a local row exists for the user.

        Args:
            user_id: User ID from a verified token

        Returns:
            The local user, or None if the provider could not supply a profile
        """
        with logfire.span("user_service.ensure_user", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if user:
                return user
            return await self._sync_from_provider(user_id)

    async def _sync_from_provider(self, user_id: UserId) -> User | None:
        try:
            profile = await self.identity_client.get_user(user_id)
        except ProviderError as e:
            logfire.error(
                "Identity provider lookup failed",
                user_id=user_id,
                status_code=e.status_code,
                error=str(e),
            )
            return None

        if profile is None:
            logfire.warn("User unknown to identity provider", user_id=user_id)
            return None

        user = await self.user_repository.save(self._user_from_profile(profile))
        logfire.info("User synced from identity provider", user_id=user_id)
        return user

    @staticmethod
    def _user_from_profile(profile: ProviderUser) -> User:
        return User(
            id=UserId(profile.id),
            name=profile.display_name(),
            username=profile.username,
            email=profile.email,
            avatar_url=profile.image_url,
        )
