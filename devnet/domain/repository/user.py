"""User repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import List, Optional

from devnet.domain.model.user import User
from devnet.domain.value import UserId


class UserRepository(ABC):
    """Repository for the local users table."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> List[User]:
        """Find all users whose ID is in ``user_ids``.

        Unknown IDs are skipped; order of the result is unspecified.
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert or update a user (upsert on ID)."""
        pass
