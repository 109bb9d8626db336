"""Content rendering routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from devnet.application.usecase.content import (
    RenderContentRequest,
    RenderContentResponse,
    RenderContentUseCase,
)

router = APIRouter(tags=["content"], route_class=DishkaRoute)


@router.post("/render", response_model=RenderContentResponse)
async def render_content(
    request: RenderContentRequest,
    render_content_use_case: FromDishka[RenderContentUseCase],
) -> RenderContentResponse:
    """Parse markup text into render nodes and list its mentions.

    Args:
        request: Text to render
        render_content_use_case: Render content use case from DI

    Returns:
        Render nodes and the distinct mentioned usernames
    """
    return await render_content_use_case.execute(request)
