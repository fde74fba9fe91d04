"""Depth-first and breadth-first walks over a binary tree's values."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from .nodes import Node


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of ``tree`` node first, then left subtree, then right."""
    if tree is None:
        return
    yield tree.value
    yield from preorder(tree.left)
    yield from preorder(tree.right)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of ``tree`` left subtree first, then node, then right."""
    if tree is None:
        return
    yield from inorder(tree.left)
    yield tree.value
    yield from inorder(tree.right)


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of ``tree`` left subtree first, then right, then node."""
    if tree is None:
        return
    yield from postorder(tree.left)
    yield from postorder(tree.right)
    yield tree.value


def levelorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of ``tree`` level by level, left to right."""
    if tree is None:
        return
    queue = deque([tree])
    while queue:
        node = queue.popleft()
        yield node.value
        queue.extend(child for child in (node.left, node.right) if child is not None)