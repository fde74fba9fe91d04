"""Binary search trees: validation, insertion, lookup and removal."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .nodes import Node


def _walk(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child is not None)


def _reachable(root: Node, node: Node) -> bool:
    """Return True if a search for ``node.value`` from ``root`` ends at ``node``."""
    current: Optional[Node] = root
    while current is not None:
        if current is node:
            return True
        if node.value < current.value:
            current = current.left
        elif node.value > current.value:
            current = current.right
        else:
            return False
    return False


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if ``tree`` is a binary search tree without duplicate values."""
    if tree is None:
        return False
    return all(_reachable(tree, node) for node in _walk(tree))


def bst_insert(tree: Optional[Node], value: int) -> Optional[Node]:
    """Insert ``value`` into the search tree and return the new node.

    With no tree a new root is created and returned. A value that is already
    present is not inserted again and None is returned.
    """
    if tree is None:
        return Node(value)
    current = tree
    while True:
        if value < current.value:
            if current.left is None:
                current.left = Node(value, current)
                return current.left
            current = current.left
        elif value > current.value:
            if current.right is None:
                current.right = Node(value, current)
                return current.right
            current = current.right
        else:
            return None


def array_to_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a search tree by inserting ``values`` in order; return its root."""
    root: Optional[Node] = None
    for value in values:
        if root is None:
            root = bst_insert(None, value)
        else:
            bst_insert(root, value)
    return root


def bst_search(tree: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding ``value``, or None if there is none."""
    current = tree
    while current is not None:
        if value == current.value:
            return current
        current = current.left if value < current.value else current.right
    return None


def _minimum(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def bst_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove ``value`` from the search tree and return the new root.

    A node with two children takes the value of its in-order successor, which
    is removed in its place. Raises KeyError if ``value`` is not in the tree.
    """
    node = bst_search(root, value)
    if node is None:
        raise KeyError(value)
    if node.left is not None and node.right is not None:
        successor = _minimum(node.right)
        node.value = successor.value
        node = successor
    parent = node.parent
    child = node.left if node.left is not None else node.right
    if parent is not None:
        if parent.left is node:
            parent.left = child
        else:
            parent.right = child
    if child is not None:
        child.parent = parent
    node.parent = node.left = node.right = None
    return child if parent is None else root