"""Post/project domain service."""

import logfire

from devnet.domain.error import NotFoundError
from devnet.domain.repository import ResourceRepository
from devnet.domain.value import ResourceType

from .base import Service


class ResourceService(Service):
    """Existence checks and comment counters for posts and projects."""

    def __init__(self, resource_repository: ResourceRepository) -> None:
        """Initialize resource service.

        Args:
            resource_repository: Post/project repository
        """
        self.resource_repository = resource_repository

    async def ensure_exists(self, resource_type: ResourceType, resource_id: int) -> None:
        """Raise if the post or project does not exist.

        Raises:
            NotFoundError: If the resource is missing
        """
        with logfire.span(
            "resource_service.ensure_exists",
            resource_type=resource_type.value,
            resource_id=resource_id,
        ):
            if not await self.resource_repository.exists(resource_type, resource_id):
                logfire.warn(
                    "Resource not found",
                    resource_type=resource_type.value,
                    resource_id=resource_id,
                )
                raise NotFoundError(resource_type.label, str(resource_id))

    async def update_comment_count(
        self, resource_type: ResourceType, resource_id: int, count: int
    ) -> None:
        """Store a freshly computed comment count on the resource."""
        with logfire.span(
            "resource_service.update_comment_count",
            resource_type=resource_type.value,
            resource_id=resource_id,
            count=count,
        ):
            await self.resource_repository.set_comment_count(
                resource_type, resource_id, count
            )
