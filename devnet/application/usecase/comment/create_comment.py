"""Create comment use case."""

from pydantic import BaseModel

from devnet.application.usecase.base import BaseUseCase
from devnet.domain.service import CommentService, ResourceService, UserService
from devnet.domain.value import (
    CommentId,
    ResourceType,
    UserId,
    placeholder_author,
)

from .schemas import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    resource_type: ResourceType
    resource_id: int
    content: str
    user_id: str  # User ID from the verified token
    parent_id: int | None = None  # Parent comment ID for replies


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CommentItem]):
    """Use case for commenting on a post or project, or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        resource_service: ResourceService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            resource_service: Post/project domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.resource_service = resource_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Steps:
        1. Validate content
        2. Verify the post or project exists
        3. Make sure the author has a local user row
        4. Create the comment (service validates the parent for replies)
        5. Recompute the resource's comment count

        Args:
            request: Create comment request

        Returns:
            The created comment with author info

        Raises:
            ValidationError: If content is empty or too long
            NotFoundError: If the resource or parent comment is missing
        """
        user_id = UserId(request.user_id)
        content = self.comment_service.clean_content(request.content)

        await self.resource_service.ensure_exists(
            request.resource_type, request.resource_id
        )

        user = await self.user_service.ensure_user(user_id)

        comment = await self.comment_service.create_comment(
            resource_type=request.resource_type,
            resource_id=request.resource_id,
            user_id=user_id,
            content=content,
            parent_id=CommentId(request.parent_id) if request.parent_id else None,
        )

        count = await self.comment_service.count_comments(
            request.resource_type, request.resource_id
        )
        await self.resource_service.update_comment_count(
            request.resource_type, request.resource_id, count
        )

        author = user.to_author() if user else placeholder_author(user_id)
        return CommentItem.from_domain(comment.model_copy(update={"user": author}))
