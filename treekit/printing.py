"""ASCII rendering of binary trees."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from treekit.node import Node, height


def _put(rows: list[list[str]], row: int, col: int, char: str) -> None:
    line = rows[row]
    if col >= len(line):
        line.extend(" " * (col + 1 - len(line)))
    line[col] = char


def _draw(tree: Optional[Node], offset: int, level: int, rows: list[list[str]]) -> int:
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _draw(tree.left, offset, level + 1, rows)
    right = _draw(tree.right, offset + left + width, level + 1, rows)
    for i, char in enumerate(label):
        _put(rows, level, offset + left + i, char)
    if level:
        if is_left:
            start, count = offset + left + width // 2, width + right
        else:
            start, count = offset - width // 2, left + width
        for i in range(count):
            _put(rows, level - 1, start + i, "-")
        _put(rows, level - 1, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of *tree*, one newline-terminated line per level."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _draw(tree, 0, 0, rows)
    lines = []
    for row in rows:
        text = "".join(row)
        stripped = text.rstrip(" ")
        if len(stripped) < 2:
            stripped = text[:2].ljust(2)
        lines.append(stripped + "\n")
    return "".join(lines)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of *tree* to *file*, standard output by default."""
    out = file if file is not None else sys.stdout
    out.write(render(tree))