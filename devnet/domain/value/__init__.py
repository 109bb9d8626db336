"""Domain value objects for devnet."""

from devnet.domain.value.identifiers import CommentId, PostId, ProjectId, UserId
from devnet.domain.value.types import (
    PLACEHOLDER_AUTHOR_NAME,
    CommentAuthor,
    CommentSort,
    ProviderUser,
    ResourceType,
    placeholder_author,
)

__all__ = [
    # Identifiers
    "CommentId",
    "PostId",
    "ProjectId",
    "UserId",
    # Types
    "CommentAuthor",
    "CommentSort",
    "PLACEHOLDER_AUTHOR_NAME",
    "ProviderUser",
    "ResourceType",
    "placeholder_author",
]
