"""PostgreSQL repository implementations."""

from devnet.persistence.repository.comment import PostgresCommentRepository
from devnet.persistence.repository.resource import PostgresResourceRepository
from devnet.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresResourceRepository",
    "PostgresUserRepository",
]
