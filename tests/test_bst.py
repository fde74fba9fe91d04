import random

import pytest

from binarytrees.bst import array_to_bst, bst_insert, bst_remove, bst_search, is_bst
from binarytrees.metrics import size
from binarytrees.nodes import Node
from binarytrees.traversal import inorder

SAMPLE = [98, 402, 12, 46, 128, 256, 512, 50]


def _links_ok(root):
    if root is None:
        return True
    if root.parent is not None:
        return False
    stack = [root]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                if child.parent is not node:
                    return False
                stack.append(child)
    return True


def test_array_to_bst_orders_values():
    root = array_to_bst(SAMPLE)
    assert root.value == 98
    assert list(inorder(root)) == sorted(SAMPLE)
    assert is_bst(root)
    assert _links_ok(root)


def test_array_to_bst_empty():
    assert array_to_bst([]) is None


def test_insert_into_empty_creates_root():
    root = bst_insert(None, 5)
    assert root.value == 5
    assert root.parent is None


def test_insert_returns_new_node_with_parent():
    root = array_to_bst([98, 12])
    node = bst_insert(root, 46)
    assert node.value == 46
    assert node.parent is root.left
    assert root.left.right is node


def test_insert_duplicate_returns_none():
    root = array_to_bst(SAMPLE)
    assert bst_insert(root, 98) is None
    assert bst_insert(root, 46) is None
    assert size(root) == len(SAMPLE)


def test_array_to_bst_skips_duplicates():
    root = array_to_bst([5, 3, 5, 3, 8])
    assert list(inorder(root)) == [3, 5, 8]


def test_search_finds_node():
    root = array_to_bst(SAMPLE)
    node = bst_search(root, 46)
    assert node.value == 46
    assert node.parent.value == 12


def test_search_missing():
    root = array_to_bst(SAMPLE)
    assert bst_search(root, 7) is None
    assert bst_search(None, 7) is None


def test_is_bst_none_and_single():
    assert is_bst(None) is False
    assert is_bst(Node(1)) is True


def test_is_bst_rejects_deep_violation():
    root = Node(10)
    root.left = Node(5, root)
    root.left.right = Node(12, root.left)
    assert is_bst(root) is False


def test_is_bst_rejects_duplicates():
    root = Node(10)
    root.left = Node(10, root)
    assert is_bst(root) is False


def test_remove_leaf():
    root = array_to_bst(SAMPLE)
    new_root = bst_remove(root, 50)
    assert new_root is root
    assert list(inorder(root)) == sorted(v for v in SAMPLE if v != 50)
    assert bst_search(root, 50) is None
    assert _links_ok(root)


def test_remove_node_with_one_child():
    root = array_to_bst(SAMPLE)
    bst_remove(root, 12)
    assert list(inorder(root)) == sorted(v for v in SAMPLE if v != 12)
    assert root.left.value == 46
    assert is_bst(root)
    assert _links_ok(root)


def test_remove_root_with_two_children_uses_successor():
    root = array_to_bst(SAMPLE)
    new_root = bst_remove(root, 98)
    assert new_root is root
    assert root.value == 128
    assert list(inorder(root)) == sorted(v for v in SAMPLE if v != 98)
    assert is_bst(root)
    assert _links_ok(root)


def test_remove_root_with_one_child_promotes_child():
    root = array_to_bst([5, 8, 9])
    new_root = bst_remove(root, 5)
    assert new_root.value == 8
    assert new_root.parent is None
    assert list(inorder(new_root)) == [8, 9]


def test_remove_only_node_empties_tree():
    assert bst_remove(Node(3), 3) is None


def test_remove_missing_raises():
    root = array_to_bst(SAMPLE)
    with pytest.raises(KeyError):
        bst_remove(root, 7)
    with pytest.raises(KeyError):
        bst_remove(None, 7)


@pytest.mark.parametrize("seed", range(5))
def test_random_removals_keep_invariants(seed):
    rng = random.Random(seed)
    values = rng.sample(range(200), 40)
    root = array_to_bst(values)
    remaining = sorted(values)
    order = values[:]
    rng.shuffle(order)
    for value in order:
        root = bst_remove(root, value)
        remaining.remove(value)
        assert list(inorder(root)) == remaining
        assert _links_ok(root)
    assert root is None