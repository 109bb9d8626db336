"""Update comment use case."""

from pydantic import BaseModel

from devnet.application.usecase.base import BaseUseCase
from devnet.domain.service import CommentService, UserService
from devnet.domain.value import CommentId, ResourceType, UserId

from .schemas import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    resource_type: ResourceType
    comment_id: int
    user_id: str  # User ID from the verified token
    content: str


class UpdateCommentUseCase(BaseUseCase[UpdateCommentRequest, CommentItem]):
    """Use case for editing the content of one's own comment."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User service for author info in the response
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            The updated comment with author info

        Raises:
            ValidationError: If content is empty or too long
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the author
        """
        user_id = UserId(request.user_id)
        updated = await self.comment_service.update_content(
            resource_type=request.resource_type,
            comment_id=CommentId(request.comment_id),
            user_id=user_id,
            content=request.content,
        )

        authors = await self.user_service.resolve_authors([user_id])
        return CommentItem.from_domain(
            updated.model_copy(update={"user": authors[user_id]})
        )
