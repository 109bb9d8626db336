"""User entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from devnet.domain.model.common import DomainModel
from devnet.domain.value import CommentAuthor, UserId


class User(DomainModel):
    """Local copy of an identity-provider user.

    Rows are synced from the provider the first time a user comments, so
    reads can resolve authors without calling the provider.
    """

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    username: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def to_author(self) -> CommentAuthor:
        """Display info attached to this user's comments."""
        return CommentAuthor(
            id=self.id,
            name=self.name,
            username=self.username,
            email=self.email,
            avatar_url=self.avatar_url,
        )
