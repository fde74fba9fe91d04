"""Linked binary trees with traversals, metrics, rotations, BST, AVL and max-heap operations, and an ASCII printer."""

__version__ = "0.1.0"