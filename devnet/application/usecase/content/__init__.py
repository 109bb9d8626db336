"""Content rendering use cases."""

from .render_content import (
    RenderContentRequest,
    RenderContentResponse,
    RenderContentUseCase,
)

__all__ = [
    "RenderContentRequest",
    "RenderContentResponse",
    "RenderContentUseCase",
]
