"""Render content use case."""

from pydantic import BaseModel, Field

from devnet.application.usecase.base import BaseUseCase
from devnet.domain.model import RenderNode
from devnet.domain.service import collect_mentions, parse


class RenderContentRequest(BaseModel):
    """Render content request."""

    text: str = Field(max_length=50000)


class RenderContentResponse(BaseModel):
    """Render content response."""

    nodes: list[RenderNode]
    mentions: list[str]


class RenderContentUseCase(
    BaseUseCase[RenderContentRequest, RenderContentResponse]
):
    """Use case for parsing post, project, comment or bio text into render nodes."""

    async def execute(self, request: RenderContentRequest) -> RenderContentResponse:
        """Parse text and list the users it mentions."""
        nodes = parse(request.text)
        return RenderContentResponse(nodes=nodes, mentions=collect_mentions(nodes))
