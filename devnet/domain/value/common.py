"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable value compared field by field.

    Author snapshots and provider profiles are values: two comments by the
    same author carry equal ``CommentAuthor`` objects.
    """

    model_config = ConfigDict(frozen=True)
