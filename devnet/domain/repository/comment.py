"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from devnet.domain.model.comment import Comment
from devnet.domain.value import CommentId, CommentSort, ResourceType, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Post and project comments live in separate tables with independent id
    sequences, so every lookup is qualified by the resource type.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, resource_type: ResourceType, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            resource_type: Type of the owning resource
            comment_id: The comment's identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_resource(
        self,
        resource_type: ResourceType,
        resource_id: int,
        sort: CommentSort = CommentSort.NEWEST,
    ) -> List[Comment]:
        """Find all comments of a post or project, flat, in display order.

        NEWEST orders by created_at ascending. TOP orders by like_count
        descending, then created_at ascending, then id.

        Args:
            resource_type: Type of the owning resource
            resource_id: Post or project ID
            sort: Requested ordering

        Returns:
            Flat list of comments, replies included
        """
        pass

    @abstractmethod
    async def create(
        self,
        resource_type: ResourceType,
        resource_id: int,
        user_id: UserId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a new comment.

        Args:
            resource_type: Type of the owning resource
            resource_id: Post or project ID
            user_id: Author ID
            content: Comment content
            parent_id: Parent comment for replies

        Returns:
            The stored comment with its assigned ID
        """
        pass

    @abstractmethod
    async def update_content(
        self, resource_type: ResourceType, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content.

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, resource_type: ResourceType, comment_id: CommentId) -> None:
        """Delete a comment and, by cascade, all replies below it."""
        pass

    @abstractmethod
    async def count_by_resource(
        self, resource_type: ResourceType, resource_id: int
    ) -> int:
        """Count comments of a post or project, replies included."""
        pass
