"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import build_tree, count_nodes
from .identity import IdentityProviderClient
from .jwt_service import JWTService
from .markup import collect_mentions, extract_mentions, parse
from .resource_service import ResourceService
from .user_service import UserService

__all__ = [
    "CommentService",
    "IdentityProviderClient",
    "JWTService",
    "ResourceService",
    "Service",
    "UserService",
    "build_tree",
    "collect_mentions",
    "count_nodes",
    "extract_mentions",
    "parse",
]
