"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Response, status
from pydantic import BaseModel

from devnet.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from devnet.config import CommentSettings
from devnet.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from devnet.domain.service import JWTService
from devnet.domain.value import CommentSort, ResourceType

router = APIRouter(tags=["comments"], route_class=DishkaRoute)

ACCESS_DENIED = "Comment not found or access denied"


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str
    parent_id: int | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str


def _require_user(
    jwt_service: JWTService, authorization: str | None, action: str
) -> str:
    """Return the authenticated user ID or raise 401."""
    user_id = jwt_service.get_user_id_from_header(authorization)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id


def _check_length(content: str, comment_settings: CommentSettings) -> None:
    """Reject content over the configured limit with 422."""
    limit = comment_settings.max_content_length
    if len(content) > limit:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Comment content must be at most {limit} characters",
        )


async def _get_comments(
    resource_type: ResourceType,
    resource_id: int,
    sort: CommentSort | None,
    render: bool,
    use_case: GetCommentsUseCase,
    comment_settings: CommentSettings,
) -> Response:
    request = GetCommentsRequest(
        resource_type=resource_type,
        resource_id=resource_id,
        sort=sort or CommentSort(comment_settings.default_sort),
        render=render,
    )
    response = await use_case.execute(request)
    return Response(content=response.to_json(), media_type="application/json")


async def _create_comment(
    resource_type: ResourceType,
    resource_id: int,
    request: CreateCommentAPIRequest,
    use_case: CreateCommentUseCase,
    jwt_service: JWTService,
    comment_settings: CommentSettings,
    authorization: str | None,
) -> CommentItem:
    user_id = _require_user(jwt_service, authorization, "create comments")
    _check_length(request.content, comment_settings)

    try:
        return await use_case.execute(
            CreateCommentRequest(
                resource_type=resource_type,
                resource_id=resource_id,
                content=request.content,
                user_id=user_id,
                parent_id=request.parent_id,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        logfire.warn("Comment creation failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"{e.resource} not found"
        )


@router.get("/posts/{post_id}/comments", response_model=GetCommentsResponse)
async def get_post_comments(
    post_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    comment_settings: FromDishka[CommentSettings],
    sort: CommentSort | None = None,
    render: bool = False,
) -> Response:
    """Get all comments for a post as a forest of reply trees.

    Args:
        post_id: Post ID
        get_comments_use_case: Get comments use case from DI
        comment_settings: Comment settings (default sort)
        sort: ``newest`` (chronological) or ``top`` (most liked first)
        render: Attach parsed content nodes to each comment
    """
    return await _get_comments(
        ResourceType.POST,
        post_id,
        sort,
        render,
        get_comments_use_case,
        comment_settings,
    )


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_post_comment(
    post_id: int,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    comment_settings: FromDishka[CommentSettings],
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Comment on a post or reply to one of its comments.

    Requires authentication.
    """
    return await _create_comment(
        ResourceType.POST,
        post_id,
        request,
        create_comment_use_case,
        jwt_service,
        comment_settings,
        authorization,
    )


@router.get("/projects/{project_id}/comments", response_model=GetCommentsResponse)
async def get_project_comments(
    project_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    comment_settings: FromDishka[CommentSettings],
    sort: CommentSort | None = None,
    render: bool = False,
) -> Response:
    """Get all comments for a project as a forest of reply trees."""
    return await _get_comments(
        ResourceType.PROJECT,
        project_id,
        sort,
        render,
        get_comments_use_case,
        comment_settings,
    )


@router.post(
    "/projects/{project_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_project_comment(
    project_id: int,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    comment_settings: FromDishka[CommentSettings],
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Comment on a project or reply to one of its comments.

    Requires authentication.
    """
    return await _create_comment(
        ResourceType.PROJECT,
        project_id,
        request,
        create_comment_use_case,
        jwt_service,
        comment_settings,
        authorization,
    )


@router.put("/comments/{resource}/{comment_id}", response_model=CommentItem)
async def update_comment(
    resource: ResourceType,
    comment_id: int,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    comment_settings: FromDishka[CommentSettings],
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Edit the content of a comment.

    Only the comment author can edit. Missing comments and comments of other
    users both answer 404.

    Args:
        resource: ``post`` or ``project``
        comment_id: Comment ID
        request: New content
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service for token verification (injected)
        comment_settings: Comment settings (content length limit)
        authorization: Bearer token header

    Raises:
        HTTPException: If not authenticated, not the author, or content is invalid
    """
    user_id = _require_user(jwt_service, authorization, "edit comments")
    _check_length(request.content, comment_settings)

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                resource_type=resource,
                comment_id=comment_id,
                user_id=user_id,
                content=request.content,
            )
        )
    except (NotFoundError, NotAuthorizedError) as e:
        logfire.warn("Comment update rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ACCESS_DENIED)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/comments/{resource}/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    resource: ResourceType,
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and all replies below it.

    Only the comment author can delete.
    """
    user_id = _require_user(jwt_service, authorization, "delete comments")

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(
                resource_type=resource, comment_id=comment_id, user_id=user_id
            )
        )
    except (NotFoundError, NotAuthorizedError) as e:
        logfire.warn("Comment deletion rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ACCESS_DENIED)
