"""PostgreSQL implementation of User repository."""

from collections.abc import Iterable
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from devnet.domain.model import User
from devnet.domain.repository import UserRepository
from devnet.domain.value import UserId
from devnet.persistence.mappers import row_to_user, user_to_dict
from devnet.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> List[User]:
        """Find all users whose ID is in ``user_ids``."""
        ids = list(user_ids)
        if not ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(ids))
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result]

    async def save(self, user: User) -> User:
        """Upsert a user on ID."""
        values = user_to_dict(user)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={
                "name": stmt.excluded.name,
                "username": stmt.excluded.username,
                "email": stmt.excluded.email,
                "avatar_url": stmt.excluded.avatar_url,
                "updated_at": datetime.now(),
            },
        ).returning(users_table)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_user(row._asdict()) if row else user
