"""In-memory post/project repository for testing."""

from devnet.domain.model.resource import Post, Project
from devnet.domain.repository.resource import ResourceRepository
from devnet.domain.value import PostId, ProjectId, ResourceType


class InMemoryResourceRepository(ResourceRepository):
    """In-memory implementation of ResourceRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._projects: dict[ProjectId, Project] = {}

    async def exists(self, resource_type: ResourceType, resource_id: int) -> bool:
        """Whether the post or project exists."""
        if resource_type is ResourceType.POST:
            return PostId(resource_id) in self._posts
        return ProjectId(resource_id) in self._projects

    async def set_comment_count(
        self, resource_type: ResourceType, resource_id: int, count: int
    ) -> None:
        """Store the denormalized comment counter."""
        store: dict = (
            self._posts if resource_type is ResourceType.POST else self._projects
        )
        resource = store.get(resource_id)
        if resource is not None:
            store[resource_id] = resource.model_copy(update={"comment_count": count})

    async def save_post(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def save_project(self, project: Project) -> Project:
        """Save or update a project."""
        self._projects[project.id] = project
        return project

    async def get_post(self, post_id: PostId) -> Post | None:
        """Read back a post (test inspection)."""
        return self._posts.get(post_id)

    async def get_project(self, project_id: ProjectId) -> Project | None:
        """Read back a project (test inspection)."""
        return self._projects.get(project_id)
