"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .resource import InMemoryResourceRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryResourceRepository",
    "InMemoryUserRepository",
]
