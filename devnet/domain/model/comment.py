"""Comment entity.

Comments are threaded discussions on posts and projects. Storage keeps them
flat: each row carries an optional ``parent_id`` and the reply tree is
rebuilt on every read by ``devnet.domain.service.comment_tree``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from devnet.domain.model.common import DomainModel
from devnet.domain.value import (
    CommentAuthor,
    CommentId,
    PostId,
    ProjectId,
    ResourceType,
    UserId,
)


class Comment(DomainModel):
    """Comment entity.

    Belongs to exactly one resource: ``post_id`` or ``project_id`` is set,
    never both. ``parent_author_name`` and ``user`` are denormalized display
    data filled in by the read path.
    """

    id: CommentId
    post_id: Optional[PostId] = None
    project_id: Optional[ProjectId] = None
    content: str
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
    parent_id: Optional[CommentId] = None
    parent_author_name: Optional[str] = None
    like_count: int = Field(default=0, ge=0)
    user: Optional[CommentAuthor] = None

    @model_validator(mode="after")
    def check_single_owner(self) -> "Comment":
        """Exactly one of post_id / project_id must be set."""
        if (self.post_id is None) == (self.project_id is None):
            raise ValueError("Comment must belong to exactly one post or project")
        return self

    @property
    def resource_type(self) -> ResourceType:
        """Type of the owning resource."""
        return ResourceType.POST if self.post_id is not None else ResourceType.PROJECT

    @property
    def resource_id(self) -> int:
        """Id of the owning resource."""
        return self.post_id if self.post_id is not None else self.project_id  # type: ignore[return-value]


class CommentNode(Comment):
    """Comment with its direct replies, as produced by the tree builder.

    The model is frozen but ``children`` is a plain list the builder appends to.
    """

    children: list["CommentNode"] = Field(default_factory=list)

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentNode":
        """Wrap a flat comment in a fresh node with no children."""
        return cls(**dict(comment), children=[])


CommentNode.model_rebuild()
