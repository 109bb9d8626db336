"""In-memory comment repository for testing."""

from datetime import datetime
from itertools import count
from typing import Optional

from devnet.domain.model.comment import Comment
from devnet.domain.repository.comment import CommentRepository
from devnet.domain.value import (
    CommentId,
    CommentSort,
    PostId,
    ProjectId,
    ResourceType,
    UserId,
)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Keeps one table per resource type with its own id sequence, like the
    database, and reproduces ON DELETE CASCADE for replies.
    """

    def __init__(self) -> None:
        self._comments: dict[ResourceType, dict[CommentId, Comment]] = {
            resource_type: {} for resource_type in ResourceType
        }
        self._sequences = {resource_type: count(1) for resource_type in ResourceType}

    def insert(self, comment: Comment) -> Comment:
        """Store a fully built comment as-is (for seeding tests)."""
        self._comments[comment.resource_type][comment.id] = comment
        return comment

    async def find_by_id(
        self, resource_type: ResourceType, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments[resource_type].get(comment_id)

    async def find_by_resource(
        self,
        resource_type: ResourceType,
        resource_id: int,
        sort: CommentSort = CommentSort.NEWEST,
    ) -> list[Comment]:
        """Find all comments of a post or project in display order."""
        comments = [
            c
            for c in self._comments[resource_type].values()
            if c.resource_id == resource_id
        ]

        if sort is CommentSort.TOP:
            comments.sort(key=lambda c: (-c.like_count, c.created_at, c.id))
        else:
            comments.sort(key=lambda c: (c.created_at, c.id))

        return comments

    async def create(
        self,
        resource_type: ResourceType,
        resource_id: int,
        user_id: UserId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a comment with the next ID of the resource's sequence."""
        table = self._comments[resource_type]
        comment_id = CommentId(next(self._sequences[resource_type]))
        while comment_id in table:
            comment_id = CommentId(next(self._sequences[resource_type]))

        owner = (
            {"post_id": PostId(resource_id)}
            if resource_type is ResourceType.POST
            else {"project_id": ProjectId(resource_id)}
        )
        comment = Comment(
            id=comment_id,
            user_id=user_id,
            content=content,
            parent_id=parent_id,
            like_count=0,
            created_at=datetime.now(),
            **owner,
        )
        table[comment_id] = comment
        return comment

    async def update_content(
        self, resource_type: ResourceType, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content."""
        table = self._comments[resource_type]
        comment = table.get(comment_id)
        if comment is None:
            return None

        # Comments are immutable
        updated = comment.model_copy(update={"content": content})
        table[comment_id] = updated
        return updated

    async def delete(self, resource_type: ResourceType, comment_id: CommentId) -> None:
        """Delete a comment and every reply below it."""
        table = self._comments[resource_type]
        pending = [comment_id]
        while pending:
            current = pending.pop()
            if table.pop(current, None) is None:
                continue
            pending.extend(c.id for c in table.values() if c.parent_id == current)

    async def count_by_resource(
        self, resource_type: ResourceType, resource_id: int
    ) -> int:
        """Count comments of a post or project."""
        return sum(
            1
            for c in self._comments[resource_type].values()
            if c.resource_id == resource_id
        )
