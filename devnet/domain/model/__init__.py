"""Domain models for devnet.

Domain models are immutable Pydantic models with no infrastructure
dependencies. Persistence and presentation map to and from them.
"""

from devnet.domain.model.comment import Comment, CommentNode
from devnet.domain.model.render import (
    BareUrl,
    Bold,
    CodeBlock,
    Heading,
    InlineCode,
    Italic,
    LineBreak,
    Link,
    ListItem,
    Mention,
    Paragraph,
    PlainText,
    Quote,
    RenderNode,
)
from devnet.domain.model.resource import Post, Project
from devnet.domain.model.user import User

__all__ = [
    "Comment",
    "CommentNode",
    "Post",
    "Project",
    "User",
    # Render nodes
    "BareUrl",
    "Bold",
    "CodeBlock",
    "Heading",
    "InlineCode",
    "Italic",
    "LineBreak",
    "Link",
    "ListItem",
    "Mention",
    "Paragraph",
    "PlainText",
    "Quote",
    "RenderNode",
]
