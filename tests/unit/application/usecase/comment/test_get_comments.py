"""Unit tests for GetCommentsUseCase."""

import json

import pytest

from devnet.application.usecase.comment import GetCommentsRequest, GetCommentsUseCase
from devnet.domain.model import Paragraph, PlainText, User
from devnet.domain.repository import CommentRepository, UserRepository
from devnet.domain.service import IdentityProviderClient
from devnet.domain.value import CommentSort, ProviderUser, ResourceType, UserId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed_thread(unit_env) -> None:
    comment_repo = await unit_env.get(CommentRepository)
    user_repo = await unit_env.get(UserRepository)
    await user_repo.save(User(id=UserId("user_alice"), name="Alice"))
    await user_repo.save(User(id=UserId("user_bob"), name="Bob"))

    comment_repo.insert(make_comment(1, user_id="user_alice", like_count=0))
    comment_repo.insert(make_comment(2, parent_id=1, user_id="user_bob"))
    comment_repo.insert(make_comment(3, user_id="user_bob", like_count=3))
    comment_repo.insert(make_comment(4, parent_id=2, user_id="user_alice"))


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_returns_nested_thread_with_authors(self, unit_env):
        """Comments come back as a forest with author info filled in."""
        await _seed_thread(unit_env)
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(
            GetCommentsRequest(resource_type=ResourceType.POST, resource_id=1)
        )

        assert response.total == 4
        assert response.resource == ResourceType.POST
        assert [c.id for c in response.comments] == [1, 3]

        first = response.comments[0]
        assert first.user.name == "Alice"
        assert first.parent_author_name is None
        assert [c.id for c in first.children] == [2]

        reply = first.children[0]
        assert reply.user.name == "Bob"
        assert reply.parent_author_name == "Alice"
        assert reply.children[0].parent_author_name == "Bob"

    @pytest.mark.asyncio
    async def test_top_sort_orders_roots_by_likes(self, unit_env):
        """Sort order of the query carries into the tree."""
        await _seed_thread(unit_env)
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(
            GetCommentsRequest(
                resource_type=ResourceType.POST,
                resource_id=1,
                sort=CommentSort.TOP,
            )
        )

        assert [c.id for c in response.comments] == [3, 1]

    @pytest.mark.asyncio
    async def test_render_attaches_content_nodes(self, unit_env):
        """Rendering is opt-in per request."""
        comment_repo = await unit_env.get(CommentRepository)
        comment_repo.insert(make_comment(1, content="plain words"))
        use_case = await unit_env.get(GetCommentsUseCase)

        plain = await use_case.execute(
            GetCommentsRequest(resource_type=ResourceType.POST, resource_id=1)
        )
        rendered = await use_case.execute(
            GetCommentsRequest(
                resource_type=ResourceType.POST, resource_id=1, render=True
            )
        )

        assert plain.comments[0].content_nodes is None
        assert rendered.comments[0].content_nodes == [
            Paragraph(children=[PlainText(text="plain words")])
        ]

    @pytest.mark.asyncio
    async def test_unknown_author_falls_back_to_provider(self, unit_env):
        """Authors missing locally are fetched from the identity provider."""
        comment_repo = await unit_env.get(CommentRepository)
        identity = await unit_env.get(IdentityProviderClient)
        identity.add_user(ProviderUser(id="user_zed", username="zed"))
        comment_repo.insert(make_comment(1, project_id=5, user_id="user_zed"))
        comment_repo.insert(make_comment(2, project_id=5, user_id="user_ghost"))
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(
            GetCommentsRequest(resource_type=ResourceType.PROJECT, resource_id=5)
        )

        assert [c.user.name for c in response.comments] == ["zed", "User"]

    @pytest.mark.asyncio
    async def test_missing_resource_returns_empty_list(self, unit_env):
        """Reading comments of an unknown resource is not an error."""
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(
            GetCommentsRequest(resource_type=ResourceType.PROJECT, resource_id=404)
        )

        assert response.comments == []
        assert response.total == 0

    @pytest.mark.asyncio
    async def test_deep_reply_chain(self, unit_env):
        """A long chain of replies converts and serializes without recursion."""
        depth = 1500
        comment_repo = await unit_env.get(CommentRepository)
        comment_repo.insert(make_comment(1))
        for comment_id in range(2, depth + 1):
            comment_repo.insert(make_comment(comment_id, parent_id=comment_id - 1))
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(
            GetCommentsRequest(
                resource_type=ResourceType.POST, resource_id=1, render=True
            )
        )

        node = response.comments[0]
        levels = 1
        while node.children:
            node = node.children[0]
            levels += 1
        assert levels == depth
        assert node.parent_author_name == "User"

        body = response.to_json()
        assert body.startswith('{"resource":"post","resource_id":1,"total":1500,')
        assert body.count('"children":[') == depth
        assert body.endswith("]}" * depth + "]}")

    @pytest.mark.asyncio
    async def test_to_json_matches_pydantic_dump(self, unit_env):
        """Stitched serialization gives the same document as pydantic."""
        await _seed_thread(unit_env)
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(
            GetCommentsRequest(
                resource_type=ResourceType.POST, resource_id=1, render=True
            )
        )

        assert json.loads(response.to_json()) == json.loads(
            response.model_dump_json()
        )
