"""Measurements and shape checks of binary trees."""

from __future__ import annotations

from collections import deque
from typing import Optional

from .nodes import Node


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path (0 for None)."""
    if tree is None:
        return 0
    return max(
        (1 + height(child) for child in (tree.left, tree.right) if child is not None),
        default=0,
    )


def _levels(tree: Optional[Node]) -> int:
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in ``tree``."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if tree.left is None and tree.right is None:
        return 1
    return leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child.

    Counting stops at a leaf, as a node without children has no descendants.
    """
    if tree is None or (tree.left is None and tree.right is None):
        return 0
    return 1 + internal_nodes(tree.left) + internal_nodes(tree.right)


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree's level count minus the right one's (0 for None)."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if every level of ``tree`` is completely filled."""
    if tree is None:
        return False
    return size(tree) == (1 << (height(tree) + 1)) - 1


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled except possibly the last, filled from the left."""
    if tree is None:
        return False
    queue = deque([tree])
    seen_gap = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                seen_gap = True
            elif seen_gap:
                return False
            else:
                queue.append(child)
    return True