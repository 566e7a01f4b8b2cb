"""Binary search tree validation, insertion, search and removal."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from treekit.node import Node


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if *tree* is a valid binary search tree with distinct values.

    An empty tree is not a binary search tree.
    """
    if tree is None:
        return False
    stack: list[tuple[Node, Optional[int], Optional[int]]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if (low is not None and node.value <= low) or (
            high is not None and node.value >= high
        ):
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


def bst_insert(root: Optional[Node], value: int) -> Optional[Node]:
    """Insert *value* into the tree at *root* and return the new node.

    With no *root* the returned node is the root of a new tree.  A value
    already present is not inserted and None is returned.
    """
    if root is None:
        return Node(value)
    current = root
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
    """Build a binary search tree by inserting *values* in order, skipping repeats."""
    root: Optional[Node] = None
    for value in dict.fromkeys(values):
        node = bst_insert(root, value)
        if root is None:
            root = node
    return root


def bst_search(tree: Optional[Node], value: int) -> Optional[Node]:
    """Return the node of *tree* holding *value*, or None."""
    node = tree
    while node is not None:
        if node.value == value:
            return node
        node = node.left if node.value > value else node.right
    return None


def _unlink(root: Node, node: Node) -> Optional[Node]:
    child = node.left if node.left is not None else node.right
    parent = node.parent
    if parent is not None:
        if parent.left is node:
            parent.left = child
        else:
            parent.right = child
    if child is not None:
        child.parent = parent
    node.parent = node.left = node.right = None
    return child if parent is None else root


def bst_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove *value* from the tree at *root* and return the new root.

    A node with two children takes the value of its in-order successor,
    which is removed in its place.  Raises KeyError if *value* is absent.
    """
    node = bst_search(root, value)
    if node is None:
        raise KeyError(value)
    if node.left is not None and node.right is not None:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node = successor
    return _unlink(root, node)