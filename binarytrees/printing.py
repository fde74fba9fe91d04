"""ASCII drawing of binary trees."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from .nodes import Node


def _height(tree: Node) -> int:
    left = 1 + _height(tree.left) if tree.left is not None else 0
    right = 1 + _height(tree.right) if tree.right is not None else 0
    return max(left, right)


class _Canvas:
    def __init__(self, rows: int) -> None:
        self.rows: List[List[str]] = [[] for _ in range(rows)]

    def put(self, row: int, col: int, char: str) -> None:
        line = self.rows[row]
        if col >= len(line):
            line.extend(" " * (col + 1 - len(line)))
        line[col] = char

    def lines(self) -> List[str]:
        result = []
        for line in self.rows:
            text = "".join(line)
            trimmed = text.rstrip(" ")
            if len(trimmed) < 2:
                trimmed = text[:2]
            result.append(trimmed)
        return result


def _draw(tree: Optional[Node], offset: int, level: int, canvas: _Canvas) -> int:
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _draw(tree.left, offset, level + 1, canvas)
    right = _draw(tree.right, offset + left + width, level + 1, canvas)
    for i, char in enumerate(label):
        canvas.put(level, offset + left + i, char)
    if level:
        if is_left:
            start, count = offset + left + width // 2, width + right
        else:
            start, count = offset - width // 2, left + width
        for i in range(count):
            canvas.put(level - 1, start + i, "-")
        canvas.put(level - 1, offset + left + width // 2, ".")
    return left + width + right


def format_tree(tree: Optional[Node]) -> str:
    """Return the drawing of ``tree``, one line per level, each ending in a newline."""
    if tree is None:
        return ""
    canvas = _Canvas(_height(tree) + 1)
    _draw(tree, 0, 0, canvas)
    return "".join(line + "\n" for line in canvas.lines())


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of ``tree`` to ``file`` (standard output by default)."""
    (file if file is not None else sys.stdout).write(format_tree(tree))