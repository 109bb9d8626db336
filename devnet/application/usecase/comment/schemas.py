"""Comment response schemas shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from devnet.domain.model import Comment, CommentNode, RenderNode
from devnet.domain.service import parse
from devnet.domain.value import CommentAuthor


class CommentItem(BaseModel):
    """Comment in API responses, with nested replies.

    ``content_nodes`` is only filled when rendering was requested.
    """

    id: int
    post_id: int | None
    project_id: int | None
    content: str
    user_id: str
    created_at: datetime
    parent_id: int | None
    parent_author_name: str | None
    like_count: int
    user: CommentAuthor | None
    children: list["CommentItem"] = []
    content_nodes: list[RenderNode] | None = None

    @classmethod
    def from_domain(cls, comment: Comment, render: bool = False) -> "CommentItem":
        """Convert a comment (or a tree node and its replies) to a response item.

        Replies are converted bottom-up from an explicit stack, so reply
        chains of any depth convert without recursion.

        Args:
            comment: Flat comment or CommentNode
            render: Whether to attach parsed content

        Returns:
            Response item with converted children
        """
        built: dict[int, CommentItem] = {}
        stack: list[tuple[Comment, bool]] = [(comment, False)]

        while stack:
            current, expanded = stack.pop()
            children = current.children if isinstance(current, CommentNode) else []

            if not expanded:
                stack.append((current, True))
                stack.extend((child, False) for child in children)
                continue

            built[id(current)] = cls._convert(
                current, [built.pop(id(child)) for child in children], render
            )

        return built[id(comment)]

    @classmethod
    def _convert(
        cls, comment: Comment, children: list["CommentItem"], render: bool
    ) -> "CommentItem":
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            project_id=comment.project_id,
            content=comment.content,
            user_id=comment.user_id,
            created_at=comment.created_at,
            parent_id=comment.parent_id,
            parent_author_name=comment.parent_author_name,
            like_count=comment.like_count,
            user=comment.user,
            children=children,
            content_nodes=parse(comment.content) if render else None,
        )

    def to_json(self) -> str:
        """Serialize the item and its replies to a JSON string.

        Produces the same document as ``model_dump_json()``. Each comment is
        dumped on its own and replies are stitched in from an explicit stack,
        so the output is not bounded by pydantic's nesting depth limit.
        """
        parts: list[str] = []
        stack: list[CommentItem | str] = [self]

        while stack:
            entry = stack.pop()
            if isinstance(entry, str):
                parts.append(entry)
                continue

            # Drop the closing brace and reopen the object for the replies
            head = entry.model_dump_json(exclude={"children"})
            parts.append(head[:-1] + ',"children":[')
            stack.append("]}")
            for index, child in enumerate(reversed(entry.children)):
                if index:
                    stack.append(",")
                stack.append(child)

        return "".join(parts)


CommentItem.model_rebuild()
