"""Max binary heaps stored as linked binary trees."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from treekit.node import Node, height, is_leaf, size


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if *tree* is complete and no child exceeds its parent.

    An empty tree is not a heap.
    """
    if tree is None:
        return False
    count = size(tree)
    stack = [(tree, 0)]
    while stack:
        node, index = stack.pop()
        if index >= count:
            return False
        for child, child_index in ((node.left, 2 * index + 1), (node.right, 2 * index + 2)):
            if child is not None:
                if child.value > node.value:
                    return False
                stack.append((child, child_index))
    return True


def heap_insert(root: Optional[Node], value: int) -> Node:
    """Insert *value* into the max heap at *root* and return the node now holding it.

    With no *root* the returned node is the root of a new heap.  The root
    node of an existing heap stays the root; values move between nodes.
    """
    if root is None:
        return Node(value)
    path = bin(size(root) + 1)[3:]
    parent = root
    for step in path[:-1]:
        parent = parent.right if step == "1" else parent.left
    node = Node(value, parent)
    if path[-1] == "1":
        parent.right = node
    else:
        parent.left = node
    while node.parent is not None and node.value > node.parent.value:
        node.value, node.parent.value = node.parent.value, node.value
        node = node.parent
    return node


def array_to_heap(values: Iterable[int]) -> Optional[Node]:
    """Build a max heap by inserting *values* in order; return its root."""
    root: Optional[Node] = None
    for value in values:
        node = heap_insert(root, value)
        if root is None:
            root = node
    return root


def _last_node(root: Node) -> Node:
    """Return the last node in pre-order that lies on the deepest level."""
    target = height(root)
    last = root
    stack = [(root, 0)]
    while stack:
        node, level = stack.pop()
        if level == target:
            last = node
        if node.right is not None:
            stack.append((node.right, level + 1))
        if node.left is not None:
            stack.append((node.left, level + 1))
    return last


def _sift_down(node: Node) -> None:
    while node.left is not None:
        if node.right is None or node.left.value > node.right.value:
            child = node.left
        else:
            child = node.right
        if node.value > child.value:
            break
        node.value, child.value = child.value, node.value
        node = child


def heap_extract(root: Optional[Node]) -> tuple[int, Optional[Node]]:
    """Remove the largest value from the heap at *root*.

    Returns the value and the root of the remaining heap, which is None once
    the heap is empty.  Raises IndexError if the heap is already empty.
    """
    if root is None:
        raise IndexError("extract from an empty heap")
    value = root.value
    if is_leaf(root):
        return value, None
    last = _last_node(root)
    root.value = last.value
    parent = last.parent
    if parent.right is last:
        parent.right = None
    else:
        parent.left = None
    last.parent = None
    _sift_down(root)
    return value, root


def heap_to_sorted_array(heap: Optional[Node]) -> list[int]:
    """Empty the heap at *heap* and return its values in descending order."""
    result: list[int] = []
    while heap is not None:
        value, heap = heap_extract(heap)
        result.append(value)
    return result