"""Get comments use case."""

from pydantic import BaseModel

from devnet.application.usecase.base import BaseUseCase
from devnet.domain.model import Comment
from devnet.domain.service import CommentService, UserService
from devnet.domain.value import CommentAuthor, CommentSort, ResourceType, UserId

from .schemas import CommentItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    resource_type: ResourceType
    resource_id: int
    sort: CommentSort = CommentSort.NEWEST
    render: bool = False


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    resource: ResourceType
    resource_id: int
    comments: list[CommentItem]
    total: int

    def to_json(self) -> str:
        """Serialize the response, comment threads of any depth included."""
        head = self.model_dump_json(exclude={"comments"})
        comments = ",".join(item.to_json() for item in self.comments)
        return head[:-1] + ',"comments":[' + comments + "]}"


class GetCommentsUseCase(
    BaseUseCase[GetCommentsRequest, GetCommentsResponse]
):
    """Use case for reading a post's or project's comment thread as a tree."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            user_service: User service for author resolution
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Steps:
        1. Fetch the flat comment rows in the requested order
        2. Resolve authors (local users, then identity provider)
        3. Fill parent author names
        4. Nest rows into reply trees, keeping the order from step 1

        Args:
            request: Get comments request

        Returns:
            Comment forest and the total number of comments
        """
        comments = await self.comment_service.get_comments(
            resource_type=request.resource_type,
            resource_id=request.resource_id,
            sort=request.sort,
        )

        if not comments:
            return GetCommentsResponse(
                resource=request.resource_type,
                resource_id=request.resource_id,
                comments=[],
                total=0,
            )

        authors = await self.user_service.resolve_authors(c.user_id for c in comments)
        enriched = self._attach_authors(comments, authors)

        tree = self.comment_service.build_thread(enriched)

        return GetCommentsResponse(
            resource=request.resource_type,
            resource_id=request.resource_id,
            comments=[CommentItem.from_domain(node, request.render) for node in tree],
            total=len(comments),
        )

    @staticmethod
    def _attach_authors(
        comments: list[Comment], authors: dict[UserId, CommentAuthor]
    ) -> list[Comment]:
        """Copy author info and parent author names onto each comment."""
        by_id: dict[int, Comment] = {}
        for comment in comments:
            by_id.setdefault(comment.id, comment)

        enriched = []
        for comment in comments:
            parent = by_id.get(comment.parent_id) if comment.parent_id else None
            parent_author_name = (
                authors[parent.user_id].name
                if parent is not None and parent.id != comment.id
                else None
            )
            enriched.append(
                comment.model_copy(
                    update={
                        "user": authors[comment.user_id],
                        "parent_author_name": parent_author_name,
                    }
                )
            )
        return enriched
