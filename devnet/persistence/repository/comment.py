"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import Table, asc, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from devnet.domain.model import Comment
from devnet.domain.repository import CommentRepository
from devnet.domain.value import CommentId, CommentSort, ResourceType, UserId
from devnet.persistence.mappers import row_to_comment
from devnet.persistence.tables import comments_table, project_comments_table

_TABLES: dict[ResourceType, tuple[Table, str]] = {
    ResourceType.POST: (comments_table, "post_id"),
    ResourceType.PROJECT: (project_comments_table, "project_id"),
}


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, resource_type: ResourceType, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        table, _ = _TABLES[resource_type]
        stmt = select(table).where(table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict(), resource_type) if row else None

    async def find_by_resource(
        self,
        resource_type: ResourceType,
        resource_id: int,
        sort: CommentSort = CommentSort.NEWEST,
    ) -> List[Comment]:
        """Find all comments of a post or project in display order."""
        table, owner_column = _TABLES[resource_type]
        stmt = select(table).where(table.c[owner_column] == resource_id)

        if sort is CommentSort.TOP:
            stmt = stmt.order_by(
                desc(table.c.like_count), asc(table.c.created_at), asc(table.c.id)
            )
        else:
            stmt = stmt.order_by(asc(table.c.created_at), asc(table.c.id))

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict(), resource_type) for row in result]

    async def create(
        self,
        resource_type: ResourceType,
        resource_id: int,
        user_id: UserId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a comment and return it with its database-assigned ID."""
        table, owner_column = _TABLES[resource_type]
        stmt = (
            table.insert()
            .values(
                **{owner_column: resource_id},
                user_id=user_id,
                content=content,
                parent_id=parent_id,
                like_count=0,
            )
            .returning(table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict(), resource_type)

    async def update_content(
        self, resource_type: ResourceType, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content."""
        table, _ = _TABLES[resource_type]
        stmt = (
            update(table)
            .where(table.c.id == comment_id)
            .values(content=content)
            .returning(table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict(), resource_type)

    async def delete(self, resource_type: ResourceType, comment_id: CommentId) -> None:
        """Delete a comment; replies go with it via ON DELETE CASCADE."""
        table, _ = _TABLES[resource_type]
        stmt = table.delete().where(table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_resource(
        self, resource_type: ResourceType, resource_id: int
    ) -> int:
        """Count comments of a post or project."""
        table, owner_column = _TABLES[resource_type]
        stmt = (
            select(func.count())
            .select_from(table)
            .where(table.c[owner_column] == resource_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
