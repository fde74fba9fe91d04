"""Max binary heaps kept as linked binary trees."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .metrics import is_perfect, size
from .nodes import Node


def _is_complete(tree: Optional[Node], index: int, count: int) -> bool:
    if tree is None:
        return True
    if index >= count:
        return False
    return (_is_complete(tree.left, 2 * index + 1, count)
            and _is_complete(tree.right, 2 * index + 2, count))


def _children_not_greater(tree: Node) -> bool:
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is None:
                continue
            if child.value > node.value:
                return False
            stack.append(child)
    return True


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if ``tree`` is a complete tree where no child exceeds its parent."""
    if tree is None:
        return False
    if not _is_complete(tree, 0, size(tree)):
        return False
    return _children_not_greater(tree)


def _insert(node: Node, value: int) -> Node:
    """Insert below ``node`` at the next free heap slot; return the node holding ``value``."""
    go_left = is_perfect(node) or not is_perfect(node.left)
    child = node.left if go_left else node.right
    if child is None:
        holder = Node(value, node)
        if go_left:
            node.left = holder
        else:
            node.right = holder
    else:
        holder = _insert(child, value)
    child = node.left if go_left else node.right
    if child.value > node.value:
        node.value, child.value = child.value, node.value
        if holder is child:
            holder = node
    return holder


def heap_insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` into the max heap and return the node that holds it.

    With no heap a new root is created and returned. The root node of an
    existing heap stays the root; values move up through it as needed.
    """
    if root is None:
        return Node(value)
    return _insert(root, value)


def array_to_heap(values: Iterable[int]) -> Optional[Node]:
    """Build a max heap by inserting ``values`` in order; return its root."""
    root: Optional[Node] = None
    for value in values:
        node = heap_insert(root, value)
        if root is None:
            root = node
    return root


def _node_at(root: Node, index: int) -> Optional[Node]:
    """Return the node at level-order position ``index`` (0 is the root)."""
    node: Optional[Node] = root
    for bit in bin(index + 1)[3:]:
        if node is None:
            return None
        node = node.left if bit == "0" else node.right
    return node


def _bubble_down(node: Optional[Node]) -> None:
    while node is not None and node.left is not None:
        largest = node.left
        if node.right is not None and node.right.value > node.left.value:
            largest = node.right
        if largest.value > node.value:
            node.value, largest.value = largest.value, node.value
        node = largest


def heap_extract(root: Optional[Node]) -> Tuple[int, Optional[Node]]:
    """Remove the maximum of the heap; return it with the heap's root afterwards.

    The last node in level order is unlinked and its value sifted down from
    the root. The root is None once the heap is empty. Raises IndexError on
    an empty heap.
    """
    if root is None:
        raise IndexError("extract from an empty heap")
    top = root.value
    count = size(root)
    parent = root if count < 2 else _node_at(root, (count - 2) // 2)
    if parent is None:
        raise ValueError("tree is not a complete binary tree")
    if parent is root and root.left is None:
        return top, None
    if parent.right is not None:
        last = parent.right
        parent.right = None
    else:
        last = parent.left
        parent.left = None
    last.parent = None
    root.value = last.value
    _bubble_down(root)
    return top, root


def heap_to_sorted_array(heap: Optional[Node]) -> List[int]:
    """Empty the heap and return its values from largest to smallest."""
    values: List[int] = []
    while heap is not None:
        value, heap = heap_extract(heap)
        values.append(value)
    return values