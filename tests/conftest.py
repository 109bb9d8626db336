"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
import logfire

from devnet.config import AuthSettings
from devnet.domain.model import Comment, Post, Project
from devnet.domain.value import CommentId, PostId, ProjectId, UserId

logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 5, 1, 12, 0, 0)


def make_comment(
    comment_id: int,
    parent_id: int | None = None,
    *,
    post_id: int | None = 1,
    project_id: int | None = None,
    user_id: str = "user_alice",
    content: str | None = None,
    like_count: int = 0,
    minutes: int | None = None,
) -> Comment:
    """Helper to build a flat comment row for tests.

    ``created_at`` defaults to BASE_TIME plus ``comment_id`` minutes so ids
    and chronological order agree unless a test says otherwise.
    """
    if project_id is not None:
        post_id = None
    return Comment(
        id=CommentId(comment_id),
        post_id=PostId(post_id) if post_id is not None else None,
        project_id=ProjectId(project_id) if project_id is not None else None,
        content=content if content is not None else f"comment {comment_id}",
        user_id=UserId(user_id),
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        like_count=like_count,
        created_at=BASE_TIME
        + timedelta(minutes=minutes if minutes is not None else comment_id),
    )


def make_post(post_id: int = 1, user_id: str = "user_alice") -> Post:
    """Helper to build a post."""
    return Post(id=PostId(post_id), user_id=UserId(user_id), content="Hello devs")


def make_project(project_id: int = 1, user_id: str = "user_alice") -> Project:
    """Helper to build a project."""
    return Project(
        id=ProjectId(project_id), user_id=UserId(user_id), title="Side project"
    )


def make_token(user_id: str, **claims: Any) -> str:
    """Mint a bearer token signed with the default test secret."""
    settings = AuthSettings()
    payload = {
        "sub": user_id,
        "exp": datetime.now(timezone.utc) + timedelta(hours=1),
        **claims,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)
