"""Post and project entities.

Only the fields the comment endpoints need are modelled here: existence,
ownership and the denormalized comment counter.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from devnet.domain.model.common import DomainModel
from devnet.domain.value import PostId, ProjectId, UserId


class Post(DomainModel):
    """Short-form post in the feed."""

    id: PostId
    user_id: UserId
    content: str
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)


class Project(DomainModel):
    """Project showcase entry."""

    id: ProjectId
    user_id: UserId
    title: str = Field(min_length=1, max_length=200)
    project_details: Optional[str] = None
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
