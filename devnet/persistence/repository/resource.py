"""PostgreSQL implementation of the post/project repository."""

from sqlalchemy import Table, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from devnet.domain.model import Post, Project
from devnet.domain.repository import ResourceRepository
from devnet.domain.value import ResourceType
from devnet.persistence.mappers import (
    post_to_dict,
    project_to_dict,
    row_to_post,
    row_to_project,
)
from devnet.persistence.tables import posts_table, projects_table

_TABLES: dict[ResourceType, Table] = {
    ResourceType.POST: posts_table,
    ResourceType.PROJECT: projects_table,
}


class PostgresResourceRepository(ResourceRepository):
    """PostgreSQL implementation of ResourceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists(self, resource_type: ResourceType, resource_id: int) -> bool:
        """Whether the post or project exists."""
        table = _TABLES[resource_type]
        stmt = select(table.c.id).where(table.c.id == resource_id)
        result = await self.session.execute(stmt)
        return result.scalar() is not None

    async def set_comment_count(
        self, resource_type: ResourceType, resource_id: int, count: int
    ) -> None:
        """Store the denormalized comment counter."""
        table = _TABLES[resource_type]
        stmt = (
            update(table).where(table.c.id == resource_id).values(comment_count=count)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def save_post(self, post: Post) -> Post:
        """Upsert a post on ID."""
        values = post_to_dict(post)
        stmt = insert(posts_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[posts_table.c.id],
            set_={
                "content": stmt.excluded.content,
                "comment_count": stmt.excluded.comment_count,
            },
        ).returning(posts_table)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_post(row._asdict()) if row else post

    async def save_project(self, project: Project) -> Project:
        """Upsert a project on ID."""
        values = project_to_dict(project)
        stmt = insert(projects_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[projects_table.c.id],
            set_={
                "title": stmt.excluded.title,
                "project_details": stmt.excluded.project_details,
                "comment_count": stmt.excluded.comment_count,
            },
        ).returning(projects_table)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_project(row._asdict()) if row else project
