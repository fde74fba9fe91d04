"""Binary tree nodes and the operations that link, unlink and relate them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class Node:
    """A binary tree node holding an integer and links to its relatives."""

    value: int
    parent: Optional[Node] = None
    left: Optional[Node] = None
    right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value})"


def binary_tree_node(parent: Optional[Node], value: int) -> Node:
    """Create a detached node whose parent link points at ``parent``.

    The parent's child links are left untouched; the caller attaches the node.
    """
    return Node(value, parent)


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new node as the left child of ``parent``.

    An existing left child becomes the left child of the new node.
    """
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    new_node = Node(value, parent, left=parent.left)
    if parent.left is not None:
        parent.left.parent = new_node
    parent.left = new_node
    return new_node


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new node as the right child of ``parent``.

    An existing right child becomes the right child of the new node.
    """
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    new_node = Node(value, parent, right=parent.right)
    if parent.right is not None:
        parent.right.parent = new_node
    parent.right = new_node
    return new_node


def delete(tree: Optional[Node]) -> None:
    """Dismantle a whole tree, breaking every link between its nodes."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.left = None
        node.right = None
        node.parent = None


def is_leaf(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no parent."""
    return node is not None and node.parent is None


def _ancestry(node: Optional[Node]):
    while node is not None:
        yield node
        node = node.parent


def depth(node: Optional[Node]) -> int:
    """Return the number of edges between ``node`` and its root (0 for None)."""
    if node is None:
        return 0
    return sum(1 for _ in _ancestry(node.parent))


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of ``node``'s parent, or None."""
    if node is None or node.parent is None:
        return None
    if node.parent.right is node:
        return node.parent.left
    return node.parent.right


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of ``node``'s parent, or None."""
    if node is None:
        return None
    return sibling(node.parent)


def lowest_common_ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the deepest node that is an ancestor of both nodes, or None.

    A node counts as its own ancestor; nodes in different trees have none.
    """
    if first is None or second is None:
        return None
    second_line = {id(node) for node in _ancestry(second)}
    return next((node for node in _ancestry(first) if id(node) in second_line), None)