"""In-memory user repository for testing."""

from collections.abc import Iterable
from typing import Optional

from devnet.domain.model.user import User
from devnet.domain.repository.user import UserRepository
from devnet.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> list[User]:
        """Find all users whose ID is in ``user_ids``."""
        return [self._users[i] for i in dict.fromkeys(user_ids) if i in self._users]

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
