"""Strongly typed identifiers for devnet domain entities.

Posts, projects and comments use integer keys assigned by the database.
Users are keyed by the identity provider's opaque subject string.
"""

from typing import NewType

UserId = NewType("UserId", str)
PostId = NewType("PostId", int)
ProjectId = NewType("ProjectId", int)
CommentId = NewType("CommentId", int)
