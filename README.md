# binarytrees

Linked binary trees built from `Node` objects. Each node holds an integer
`value` and `parent`, `left` and `right` links. The operations are plain
functions grouped by module:

- **Building and navigating** (`binarytrees.nodes`): `binary_tree_node`
  creates a node that points at its parent (attach it to the parent
  yourself), `insert_left` / `insert_right` push a new node between a parent
  and its existing child (a missing parent raises `ValueError`), `delete`
  breaks every link in a tree, and `is_leaf`, `is_root`, `depth` (edges up to
  the root), `sibling`, `uncle` and `lowest_common_ancestor` answer questions
  about a node.
- **Traversals** (`binarytrees.traversal`): `preorder`, `inorder`,
  `postorder` and `levelorder` are generators yielding the stored values.
- **Metrics** (`binarytrees.metrics`): `height` (edges on the longest
  downward path), `size`, `leaves`, `internal_nodes`, `balance`, and the
  shape checks `is_full`, `is_perfect`, `is_complete`.
- **Rotations** (`binarytrees.rotate`): `rotate_left` and `rotate_right`
  return the new subtree root, or `None` when there is no child to rotate
  around. The old parent's child link is left for the caller to update.
- **Binary search trees** (`binarytrees.bst`): `is_bst`, `bst_insert`
  (returns the new node, or `None` for a value already present),
  `array_to_bst`, `bst_search`, and `bst_remove` (returns the new root and
  raises `KeyError` for a missing value; a node with two children takes its
  in-order successor's value).
- **AVL trees** (`binarytrees.avl`): `is_avl`, `avl_insert` (returns the new
  node; rebalancing may move the root, which is reached through the new
  node's parent links), `array_to_avl` (skips repeated values),
  `avl_remove` (returns the rebalanced root) and `sorted_array_to_avl`.
- **Max binary heaps** (`binarytrees.heap`): `is_heap`, `heap_insert`
  (returns the node holding the value; the root node stays the root),
  `array_to_heap`, `heap_extract` (returns `(maximum, new_root)`, with
  `new_root` `None` once the heap is empty; an empty heap raises
  `IndexError`) and `heap_to_sorted_array` (empties the heap and returns its
  values largest first).
- **Printing** (`binarytrees.printing`): `format_tree` renders a tree as
  ASCII art, `print_tree` writes that drawing to a stream (standard output
  by default).

## Installation

```
pip install .
```

## Example

```python
from binarytrees.nodes import binary_tree_node
from binarytrees.printing import print_tree
from binarytrees.traversal import inorder

root = binary_tree_node(None, 98)
root.left = binary_tree_node(root, 12)
root.left.left = binary_tree_node(root.left, 6)
root.left.right = binary_tree_node(root.left, 16)
root.right = binary_tree_node(root, 402)
root.right.left = binary_tree_node(root.right, 256)
root.right.right = binary_tree_node(root.right, 512)

print_tree(root)
print(list(inorder(root)))  # [6, 12, 16, 98, 256, 402, 512]
```

Values are printed zero-padded to three digits, one box per node, with
dashed connectors between each parent and its children:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

Building search structures from a list of values:

```python
from binarytrees.avl import array_to_avl, is_avl
from binarytrees.heap import array_to_heap, heap_extract, heap_to_sorted_array

tree = array_to_avl([98, 402, 12, 46, 128, 256, 512, 50])
assert is_avl(tree)

heap = array_to_heap([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
largest, heap = heap_extract(heap)     # 91
print(heap_to_sorted_array(heap))      # remaining values, largest first
```

## What it does not do

This is a library only: there is no command-line tool, and trees live in
memory as linked `Node` objects with no way to save or load them.

## Running the tests

```
pip install .[test]
pytest
```