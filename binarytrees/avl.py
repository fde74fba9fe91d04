"""AVL trees: validation, insertion, removal and building from sequences."""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence

from .bst import bst_remove, bst_search
from .metrics import balance
from .nodes import Node
from .rotate import rotate_left, rotate_right


def _checked_levels(node: Optional[Node], low: float, high: float) -> Optional[int]:
    """Return the level count of a valid AVL subtree, or None if it is not one."""
    if node is None:
        return 0
    if not low <= node.value <= high:
        return None
    left = _checked_levels(node.left, low, node.value - 1)
    if left is None:
        return None
    right = _checked_levels(node.right, node.value + 1, high)
    if right is None or abs(left - right) > 1:
        return None
    return 1 + max(left, right)


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if ``tree`` is a height-balanced search tree without duplicates."""
    if tree is None:
        return False
    return _checked_levels(tree, -math.inf, math.inf) is not None


def _rebalance_after_insert(node: Node, value: int) -> Node:
    factor = balance(node)
    if factor > 1 and node.left.value > value:
        return rotate_right(node)
    if factor < -1 and node.right.value < value:
        return rotate_left(node)
    if factor > 1 and node.left.value < value:
        node.left = rotate_left(node.left)
        return rotate_right(node)
    if factor < -1 and node.right.value > value:
        node.right = rotate_right(node.right)
        return rotate_left(node)
    return node


def _insert(node: Optional[Node], parent: Optional[Node], value: int,
            created: List[Node]) -> Node:
    if node is None:
        new_node = Node(value, parent)
        created.append(new_node)
        return new_node
    if value < node.value:
        node.left = _insert(node.left, node, value, created)
    elif value > node.value:
        node.right = _insert(node.right, node, value, created)
    else:
        return node
    return _rebalance_after_insert(node, value)


def _top(node: Node) -> Node:
    while node.parent is not None:
        node = node.parent
    return node


def avl_insert(tree: Optional[Node], value: int) -> Optional[Node]:
    """Insert ``value`` into the AVL tree and return the new node.

    With no tree a new root is created and returned. Rebalancing may change
    the root; the current root is reached through the new node's parent links.
    A value that is already present is not inserted and None is returned.
    """
    if tree is None:
        return Node(value)
    created: List[Node] = []
    _insert(tree, tree, value, created)
    return created[0] if created else None


def array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree from ``values``, skipping repeats; return its root."""
    root: Optional[Node] = None
    seen = set()
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        new_node = avl_insert(root, value)
        root = _top(new_node)
    return root


def _rebalance_all(node: Optional[Node]) -> Optional[Node]:
    if node is None or (node.left is None and node.right is None):
        return node
    node.left = _rebalance_all(node.left)
    node.right = _rebalance_all(node.right)
    factor = balance(node)
    if factor > 1:
        return rotate_right(node)
    if factor < -1:
        return rotate_left(node)
    return node


def avl_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove ``value`` from the AVL tree, rebalance it and return the new root.

    A missing value leaves the tree's contents unchanged.
    """
    if root is None:
        return None
    if bst_search(root, value) is not None:
        root = bst_remove(root, value)
    return _rebalance_all(root)


def _build(parent: Optional[Node], values: Sequence[int], begin: int, last: int) -> Optional[Node]:
    if begin > last:
        return None
    mid = (begin + last) // 2
    node = Node(values[mid], parent)
    node.left = _build(node, values, begin, mid - 1)
    node.right = _build(node, values, mid + 1, last)
    return node


def sorted_array_to_avl(values: Sequence[int]) -> Optional[Node]:
    """Build a balanced tree from sorted ``values`` by splitting at the middle."""
    if not values:
        return None
    return _build(None, values, 0, len(values) - 1)