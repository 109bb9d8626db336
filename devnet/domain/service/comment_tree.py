"""Reply tree construction.

Comments are stored flat with a ``parent_id`` pointer. ``build_tree`` turns a
flat list, already sorted by the caller, into a forest of ``CommentNode``s.
Roots and every ``children`` list keep the relative input order; the builder
never re-sorts.

Malformed input degrades instead of raising:

- a ``parent_id`` that is not in the input (or points at the comment itself)
  makes the comment a root
- duplicate ids each get their own node; replies attach to the first one
- a parent cycle in corrupt data is cut at the member that appears first in
  the input, which becomes a root
"""

from collections.abc import Sequence

from devnet.domain.model.comment import Comment, CommentNode
from devnet.domain.value import CommentId

_UNVISITED, _ON_PATH, _DONE = 0, 1, 2


def build_tree(comments: Sequence[Comment]) -> list[CommentNode]:
    """Build the reply forest for one resource's comments.

    Args:
        comments: Flat comments of a single post or project, in display order

    Returns:
        Root nodes in input order, each with its replies nested in ``children``
    """
    nodes = [CommentNode.from_comment(comment) for comment in comments]

    lookup: dict[CommentId, int] = {}
    for index, node in enumerate(nodes):
        lookup.setdefault(node.id, index)

    parents: list[int | None] = []
    for node in nodes:
        if node.parent_id is None or node.parent_id == node.id:
            parents.append(None)
        else:
            parents.append(lookup.get(node.parent_id))

    _break_cycles(parents)

    roots: list[CommentNode] = []
    for node, parent_index in zip(nodes, parents):
        if parent_index is None:
            roots.append(node)
        else:
            nodes[parent_index].children.append(node)

    return roots


def count_nodes(nodes: Sequence[CommentNode]) -> int:
    """Count nodes in a forest, replies included."""
    total = 0
    stack = list(nodes)
    while stack:
        node = stack.pop()
        total += 1
        stack.extend(node.children)
    return total


def _break_cycles(parents: list[int | None]) -> None:
    """Detach one member of every parent cycle, in place.

    Each node has at most one parent, so a connected component holds at most
    one cycle and a single walk from any of its nodes finds it.
    """
    state = [_UNVISITED] * len(parents)

    for start in range(len(parents)):
        path: list[int] = []
        current = start
        while current is not None and state[current] == _UNVISITED:
            state[current] = _ON_PATH
            path.append(current)
            current = parents[current]

        if current is not None and state[current] == _ON_PATH:
            cycle = path[path.index(current) :]
            parents[min(cycle)] = None

        for index in path:
            state[index] = _DONE
