"""Comment domain service."""

import logfire

from devnet.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from devnet.domain.model.comment import Comment, CommentNode
from devnet.domain.repository import CommentRepository
from devnet.domain.value import CommentId, CommentSort, ResourceType, UserId

from .base import Service
from .comment_tree import build_tree


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self, comment_repository: CommentRepository, max_content_length: int = 10000
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            max_content_length: Longest accepted content after trimming
        """
        self.comment_repository = comment_repository
        self.max_content_length = max_content_length

    def clean_content(self, content: str) -> str:
        """Trim content and enforce length rules.

        Raises:
            ValidationError: If content is empty or too long
        """
        cleaned = content.strip()
        if not cleaned:
            raise ValidationError("Comment content is required")
        if len(cleaned) > self.max_content_length:
            raise ValidationError(
                f"Comment content must be at most {self.max_content_length} characters"
            )
        return cleaned

    async def create_comment(
        self,
        resource_type: ResourceType,
        resource_id: int,
        user_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or project, or a reply to a comment.

        Args:
            resource_type: Type of the owning resource
            resource_id: Post or project ID
            user_id: Author user ID
            content: Comment content (trimmed before storing)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty or too long
            NotFoundError: If the parent is missing or on another resource
        """
        with logfire.span(
            "comment_service.create_comment",
            resource_type=resource_type.value,
            resource_id=resource_id,
            user_id=user_id,
            parent_id=parent_id,
        ):
            cleaned = self.clean_content(content)

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(
                    resource_type, parent_id
                )
                if parent is None or parent.resource_id != resource_id:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=parent_id,
                        resource_type=resource_type.value,
                        resource_id=resource_id,
                    )
                    raise NotFoundError("Parent comment", str(parent_id))

            comment = await self.comment_repository.create(
                resource_type=resource_type,
                resource_id=resource_id,
                user_id=user_id,
                content=cleaned,
                parent_id=parent_id,
            )
            logfire.info(
                "Comment created",
                comment_id=comment.id,
                resource_type=resource_type.value,
                resource_id=resource_id,
                is_reply=parent_id is not None,
            )
            return comment

    async def get_comments(
        self,
        resource_type: ResourceType,
        resource_id: int,
        sort: CommentSort = CommentSort.NEWEST,
    ) -> list[Comment]:
        """Get all comments of a resource, flat, in the requested order.

        Args:
            resource_type: Type of the owning resource
            resource_id: Post or project ID
            sort: Requested ordering

        Returns:
            Flat list of comments
        """
        with logfire.span(
            "comment_service.get_comments",
            resource_type=resource_type.value,
            resource_id=resource_id,
            sort=sort.value,
        ):
            comments = await self.comment_repository.find_by_resource(
                resource_type, resource_id, sort
            )
            logfire.info(
                "Comments retrieved",
                resource_type=resource_type.value,
                resource_id=resource_id,
                count=len(comments),
            )
            return comments

    def build_thread(self, comments: list[Comment]) -> list[CommentNode]:
        """Nest flat comments into reply trees, keeping their order."""
        with logfire.span("comment_service.build_thread", count=len(comments)):
            return build_tree(comments)

    async def get_own_comment(
        self, resource_type: ResourceType, comment_id: CommentId, user_id: UserId
    ) -> Comment:
        """Get a comment the user is allowed to modify.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.get_own_comment",
            resource_type=resource_type.value,
            comment_id=comment_id,
            user_id=user_id,
        ):
            comment = await self.comment_repository.find_by_id(
                resource_type, comment_id
            )
            if comment is None:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))
            if comment.user_id != user_id:
                logfire.warn(
                    "Comment owned by another user",
                    comment_id=comment_id,
                    user_id=user_id,
                )
                raise NotAuthorizedError("comment", str(comment_id), user_id)
            return comment

    async def update_content(
        self,
        resource_type: ResourceType,
        comment_id: CommentId,
        user_id: UserId,
        content: str,
    ) -> Comment:
        """Edit the content of the user's own comment.

        Raises:
            ValidationError: If content is empty or too long
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.update_content",
            resource_type=resource_type.value,
            comment_id=comment_id,
        ):
            cleaned = self.clean_content(content)
            await self.get_own_comment(resource_type, comment_id, user_id)

            updated = await self.comment_repository.update_content(
                resource_type, comment_id, cleaned
            )
            if updated is None:
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment content updated",
                comment_id=comment_id,
                content_length=len(cleaned),
            )
            return updated

    async def delete_comment(
        self, resource_type: ResourceType, comment_id: CommentId, user_id: UserId
    ) -> Comment:
        """Delete the user's own comment together with its replies.

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            resource_type=resource_type.value,
            comment_id=comment_id,
        ):
            comment = await self.get_own_comment(resource_type, comment_id, user_id)
            await self.comment_repository.delete(resource_type, comment_id)
            logfire.info("Comment deleted", comment_id=comment_id)
            return comment

    async def count_comments(
        self, resource_type: ResourceType, resource_id: int
    ) -> int:
        """Count comments of a resource, replies included."""
        return await self.comment_repository.count_by_resource(
            resource_type, resource_id
        )
