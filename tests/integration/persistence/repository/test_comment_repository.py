"""Integration tests for PostgresCommentRepository.

Requires a migrated PostgreSQL database reachable at DATABASE__URL.
"""

import os
import random

import pytest

from devnet.domain.repository import CommentRepository, ResourceRepository
from devnet.domain.value import CommentSort, ResourceType, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ,
    reason="needs PostgreSQL (set DATABASE__URL)",
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


async def _new_post_id(integration_env) -> int:
    resource_repo = await integration_env.get(ResourceRepository)
    post_id = random.randint(1_000_000, 2_000_000_000)
    await resource_repo.save_post(make_post(post_id))
    return post_id


class TestCommentRepositoryIntegration:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_create_and_sort(self, integration_env):
        """Ids come from the database and TOP ranks by likes."""
        repo = await integration_env.get(CommentRepository)
        post_id = await _new_post_id(integration_env)

        first = await repo.create(ResourceType.POST, post_id, UserId("u1"), "first")
        second = await repo.create(
            ResourceType.POST, post_id, UserId("u2"), "second", first.id
        )

        newest = await repo.find_by_resource(ResourceType.POST, post_id)
        top = await repo.find_by_resource(
            ResourceType.POST, post_id, CommentSort.TOP
        )

        assert [c.id for c in newest] == [first.id, second.id]
        assert [c.id for c in top] == [first.id, second.id]
        assert second.parent_id == first.id
        assert second.post_id == post_id

    @pytest.mark.asyncio
    async def test_delete_cascades(self, integration_env):
        """ON DELETE CASCADE removes replies."""
        repo = await integration_env.get(CommentRepository)
        post_id = await _new_post_id(integration_env)
        root = await repo.create(ResourceType.POST, post_id, UserId("u1"), "root")
        await repo.create(ResourceType.POST, post_id, UserId("u2"), "reply", root.id)

        await repo.delete(ResourceType.POST, root.id)

        assert await repo.count_by_resource(ResourceType.POST, post_id) == 0

    @pytest.mark.asyncio
    async def test_update_content(self, integration_env):
        repo = await integration_env.get(CommentRepository)
        post_id = await _new_post_id(integration_env)
        comment = await repo.create(ResourceType.POST, post_id, UserId("u1"), "old")

        updated = await repo.update_content(ResourceType.POST, comment.id, "new")

        assert updated is not None
        assert updated.content == "new"
