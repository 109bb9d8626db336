"""Delete comment use case."""

from pydantic import BaseModel

from devnet.application.usecase.base import BaseUseCase
from devnet.domain.service import CommentService, ResourceService
from devnet.domain.value import CommentId, ResourceType, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    resource_type: ResourceType
    comment_id: int
    user_id: str  # User ID from the verified token


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    message: str


class DeleteCommentUseCase(
    BaseUseCase[DeleteCommentRequest, DeleteCommentResponse]
):
    """Use case for deleting one's own comment together with its replies."""

    def __init__(
        self,
        comment_service: CommentService,
        resource_service: ResourceService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            resource_service: Post/project domain service
        """
        self.comment_service = comment_service
        self.resource_service = resource_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the author
        """
        deleted = await self.comment_service.delete_comment(
            resource_type=request.resource_type,
            comment_id=CommentId(request.comment_id),
            user_id=UserId(request.user_id),
        )

        count = await self.comment_service.count_comments(
            request.resource_type, deleted.resource_id
        )
        await self.resource_service.update_comment_count(
            request.resource_type, deleted.resource_id, count
        )

        return DeleteCommentResponse(message="Comment deleted successfully")
