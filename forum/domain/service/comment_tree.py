"""Comment tree builder.

Comments are stored flat with a parent pointer. ``build_tree`` groups them
once into an id-indexed arena with per-parent child lists; iterating the
resulting tree walks it in display order without recursion.
"""

from collections.abc import Iterable, Iterator
from typing import Optional

import logfire

from forum.domain.model import Comment
from forum.domain.value import CommentId


def _order_key(comment: Comment):
    return (comment.created_at, comment.id)


class CommentTree:
    """Forest of comments for one post.

    Iterating yields ``(comment, depth)`` pairs in pre-order: roots oldest
    first, each node immediately followed by its replies, oldest first.
    Every iteration starts a fresh walk.
    """

    def __init__(
        self,
        nodes: dict[CommentId, Comment],
        children: dict[CommentId, list[CommentId]],
        roots: list[CommentId],
    ) -> None:
        self._nodes = nodes
        self._children = children
        self._roots = roots

    def __iter__(self) -> Iterator[tuple[Comment, int]]:
        stack = [(comment_id, 0) for comment_id in reversed(self._roots)]
        while stack:
            comment_id, depth = stack.pop()
            yield self._nodes[comment_id], depth
            for child_id in reversed(self._children.get(comment_id, ())):
                stack.append((child_id, depth + 1))

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, comment_id: object) -> bool:
        return comment_id in self._nodes

    def get(self, comment_id: CommentId) -> Optional[Comment]:
        return self._nodes.get(comment_id)

    @property
    def roots(self) -> list[Comment]:
        return [self._nodes[comment_id] for comment_id in self._roots]

    def children_of(self, comment_id: CommentId) -> list[Comment]:
        """Direct replies of a comment, oldest first."""
        return [self._nodes[c] for c in self._children.get(comment_id, ())]


def _mark_reached(
    start: CommentId,
    children: dict[CommentId, list[CommentId]],
    reached: set[CommentId],
) -> None:
    stack = [start]
    while stack:
        comment_id = stack.pop()
        reached.add(comment_id)
        stack.extend(children.get(comment_id, ()))


def build_tree(comments: Iterable[Comment]) -> CommentTree:
    """Build the reply forest of a post from its flat comment list.

    A comment whose parent is not in the input becomes a root. A comment
    that cannot be reached from any root (only possible when parent links
    form a cycle) is detached from its parent and also becomes a root, so
    the tree always holds exactly the comments it was given.

    Args:
        comments: Comments of one post, in any order

    Returns:
        The comment tree

    Raises:
        ValueError: If two comments share an id
    """
    ordered = sorted(comments, key=_order_key)

    nodes: dict[CommentId, Comment] = {}
    for comment in ordered:
        if comment.id in nodes:
            raise ValueError(f"Duplicate comment id: {comment.id}")
        nodes[comment.id] = comment

    children: dict[CommentId, list[CommentId]] = {}
    roots: list[CommentId] = []
    for comment in ordered:
        if comment.parent_id is not None and comment.parent_id in nodes:
            children.setdefault(comment.parent_id, []).append(comment.id)
        else:
            roots.append(comment.id)

    reached: set[CommentId] = set()
    for root_id in roots:
        _mark_reached(root_id, children, reached)

    if len(reached) < len(nodes):
        orphaned = [c.id for c in ordered if c.id not in reached]
        logfire.error(
            "Comment parent links form a cycle",
            post_id=str(nodes[orphaned[0]].post_id),
            unreachable=len(orphaned),
        )
        for comment_id in orphaned:
            if comment_id in reached:
                continue
            # Cut the cycle at this node
            children[nodes[comment_id].parent_id].remove(comment_id)
            roots.append(comment_id)
            _mark_reached(comment_id, children, reached)
        roots.sort(key=lambda comment_id: _order_key(nodes[comment_id]))

    return CommentTree(nodes, children, roots)
