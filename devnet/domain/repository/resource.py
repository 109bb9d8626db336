"""Post/project repository interface."""

from abc import ABC, abstractmethod

from devnet.domain.model.resource import Post, Project
from devnet.domain.value import ResourceType


class ResourceRepository(ABC):
    """Repository for the resources comments attach to.

    Posts and projects are owned by other endpoints of the product; the
    comment API only checks existence and maintains the comment counter.
    """

    @abstractmethod
    async def exists(self, resource_type: ResourceType, resource_id: int) -> bool:
        """Whether the post or project exists."""
        pass

    @abstractmethod
    async def set_comment_count(
        self, resource_type: ResourceType, resource_id: int, count: int
    ) -> None:
        """Store the denormalized comment counter."""
        pass

    @abstractmethod
    async def save_post(self, post: Post) -> Post:
        """Insert or update a post."""
        pass

    @abstractmethod
    async def save_project(self, project: Project) -> Project:
        """Insert or update a project."""
        pass
