"""Unit tests for UpdateCommentUseCase."""

import pytest

from devnet.application.usecase.comment import (
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from devnet.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from devnet.domain.model import User
from devnet.domain.repository import CommentRepository, UserRepository
from devnet.domain.value import ResourceType, UserId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        """The response carries the new content and the author."""
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(User(id=UserId("user_alice"), name="Alice"))
        comment_repo.insert(make_comment(1, user_id="user_alice", content="typo"))
        use_case = await unit_env.get(UpdateCommentUseCase)

        response = await use_case.execute(
            UpdateCommentRequest(
                resource_type=ResourceType.POST,
                comment_id=1,
                user_id="user_alice",
                content="fixed",
            )
        )

        assert response.content == "fixed"
        assert response.user.name == "Alice"
        stored = await comment_repo.find_by_id(ResourceType.POST, 1)
        assert stored.content == "fixed"

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        """Non-authors are rejected and the comment is unchanged."""
        comment_repo = await unit_env.get(CommentRepository)
        comment_repo.insert(make_comment(1, user_id="user_alice", content="mine"))
        use_case = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateCommentRequest(
                    resource_type=ResourceType.POST,
                    comment_id=1,
                    user_id="user_bob",
                    content="hijacked",
                )
            )

        stored = await comment_repo.find_by_id(ResourceType.POST, 1)
        assert stored.content == "mine"

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateCommentRequest(
                    resource_type=ResourceType.PROJECT,
                    comment_id=1,
                    user_id="user_alice",
                    content="text",
                )
            )

    @pytest.mark.asyncio
    async def test_blank_content(self, unit_env):
        comment_repo = await unit_env.get(CommentRepository)
        comment_repo.insert(make_comment(1, user_id="user_alice"))
        use_case = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                UpdateCommentRequest(
                    resource_type=ResourceType.POST,
                    comment_id=1,
                    user_id="user_alice",
                    content="",
                )
            )
