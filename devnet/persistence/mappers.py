"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict

from devnet.domain.model import Comment, Post, Project, User
from devnet.domain.value import (
    CommentId,
    PostId,
    ProjectId,
    ResourceType,
    UserId,
)


def row_to_comment(row: Dict[str, Any], resource_type: ResourceType) -> Comment:
    """Convert a comments / project_comments row to a Comment.

    Args:
        row: Database row as dict
        resource_type: Which table the row came from

    Returns:
        Comment domain model
    """
    owner = (
        {"post_id": PostId(row["post_id"])}
        if resource_type is ResourceType.POST
        else {"project_id": ProjectId(row["project_id"])}
    )
    return Comment(
        id=CommentId(row["id"]),
        content=row["content"],
        user_id=UserId(row["user_id"]),
        created_at=row["created_at"],
        parent_id=(
            CommentId(row["parent_id"]) if row.get("parent_id") is not None else None
        ),
        like_count=row.get("like_count") or 0,
        **owner,
    )


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(row["id"]),
        name=row["name"],
        username=row.get("username"),
        email=row.get("email"),
        avatar_url=row.get("avatar_url"),
        bio=row.get("bio"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(row["id"]),
        user_id=UserId(row["user_id"]),
        content=row["content"],
        comment_count=row["comment_count"],
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_project(row: Dict[str, Any]) -> Project:
    """Convert database row to Project domain model."""
    return Project(
        id=ProjectId(row["id"]),
        user_id=UserId(row["user_id"]),
        title=row["title"],
        project_details=row.get("project_details"),
        comment_count=row["comment_count"],
        created_at=row["created_at"],
    )


def project_to_dict(project: Project) -> Dict[str, Any]:
    """Convert Project domain model to database dict."""
    return project.model_dump()
