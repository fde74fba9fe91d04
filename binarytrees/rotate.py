"""Left and right rotations of binary trees."""

from __future__ import annotations

from typing import Optional

from .nodes import Node


def rotate_left(tree: Optional[Node]) -> Optional[Node]:
    """Rotate ``tree`` left and return the new subtree root.

    The right child takes ``tree``'s place and inherits its parent link; the
    parent's own child link is left for the caller to update. Returns None
    when ``tree`` is None or has no right child.
    """
    if tree is None or tree.right is None:
        return None
    pivot = tree.right
    moved = pivot.left
    pivot.parent = tree.parent
    pivot.left = tree
    tree.parent = pivot
    tree.right = moved
    if moved is not None:
        moved.parent = tree
    return pivot


def rotate_right(tree: Optional[Node]) -> Optional[Node]:
    """Rotate ``tree`` right and return the new subtree root.

    The left child takes ``tree``'s place and inherits its parent link; the
    parent's own child link is left for the caller to update. Returns None
    when ``tree`` is None or has no left child.
    """
    if tree is None or tree.left is None:
        return None
    pivot = tree.left
    moved = pivot.right
    pivot.parent = tree.parent
    pivot.right = tree
    tree.parent = pivot
    tree.left = moved
    if moved is not None:
        moved.parent = tree
    return pivot