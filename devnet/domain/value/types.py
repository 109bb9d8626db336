"""Domain value objects for devnet."""

from enum import Enum

from devnet.domain.value.common import ValueObject


class ResourceType(str, Enum):
    """Content types that own comment threads."""

    POST = "post"
    PROJECT = "project"

    @property
    def label(self) -> str:
        """Human readable resource name used in error messages."""
        return self.value.capitalize()


class CommentSort(str, Enum):
    """Orderings a comment thread can be requested in.

    NEWEST is chronological (oldest first), matching how threads read.
    TOP ranks by like count, ties broken chronologically.
    """

    NEWEST = "newest"
    TOP = "top"


class CommentAuthor(ValueObject):
    """Denormalized author display info attached to a comment."""

    id: str
    name: str
    username: str | None = None
    email: str | None = None
    avatar_url: str | None = None


PLACEHOLDER_AUTHOR_NAME = "User"


def placeholder_author(user_id: str) -> CommentAuthor:
    """Author shown when neither the users table nor the provider knows the id."""
    return CommentAuthor(id=user_id, name=PLACEHOLDER_AUTHOR_NAME)


class ProviderUser(ValueObject):
    """User profile as returned by the identity provider's user API."""

    id: str
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None
    email: str | None = None
    image_url: str | None = None

    def display_name(self) -> str:
        """Best available display name.

        Full name, then first name, then last name, then username, then the
        local part of the email address, then the generic placeholder.
        """
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}".strip()
        if self.first_name:
            return self.first_name
        if self.last_name:
            return self.last_name
        if self.username:
            return self.username
        if self.email:
            local_part = self.email.split("@")[0]
            if local_part:
                return local_part
        return PLACEHOLDER_AUTHOR_NAME
