"""Repository interfaces for the devnet domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from devnet.domain.repository.comment import CommentRepository
from devnet.domain.repository.resource import ResourceRepository
from devnet.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "ResourceRepository",
    "UserRepository",
]
