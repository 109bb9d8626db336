"""Unit tests for RenderContentUseCase."""

import pytest

from devnet.application.usecase.content import (
    RenderContentRequest,
    RenderContentUseCase,
)
from devnet.domain.model import CodeBlock, Heading, Mention, Paragraph, PlainText
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRenderContentUseCase:
    """Tests for RenderContentUseCase."""

    @pytest.mark.asyncio
    async def test_renders_nodes_and_mentions(self, unit_env):
        use_case = await unit_env.get(RenderContentUseCase)

        response = await use_case.execute(
            RenderContentRequest(text="# Release\nthanks @ana\n```\n@not_me\n```")
        )

        assert response.nodes == [
            Heading(level=1, children=[PlainText(text="Release")]),
            Paragraph(children=[PlainText(text="thanks "), Mention(username="ana")]),
            CodeBlock(language="plaintext", code="@not_me"),
        ]
        assert response.mentions == ["ana"]

    @pytest.mark.asyncio
    async def test_empty_text(self, unit_env):
        use_case = await unit_env.get(RenderContentUseCase)

        response = await use_case.execute(RenderContentRequest(text=""))

        assert response.nodes == []
        assert response.mentions == []
