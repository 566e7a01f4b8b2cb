"""AVL tree validation, insertion, construction and removal."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from treekit.analysis import rotate_left, rotate_right
from treekit.bst import bst_remove
from treekit.node import Node, balance, is_leaf


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if *tree* is a binary search tree with distinct values
    in which no node's subtrees differ in height by more than one.

    An empty tree is not an AVL tree.
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
        if abs(balance(node)) > 1:
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


def _insert(
    node: Optional[Node], parent: Optional[Node], value: int
) -> tuple[Node, Optional[Node]]:
    """Insert *value* below *node*; return the subtree's root and the new node."""
    if node is None:
        created = Node(value, parent)
        return created, created
    if value < node.value:
        node.left, created = _insert(node.left, node, value)
    elif value > node.value:
        node.right, created = _insert(node.right, node, value)
    else:
        return node, None

    factor = balance(node)
    if factor > 1 and node.left.value > value:
        node = rotate_right(node)
    elif factor < -1 and node.right.value < value:
        node = rotate_left(node)
    elif factor > 1 and node.left.value < value:
        node.left = rotate_left(node.left)
        node = rotate_right(node)
    elif factor < -1 and node.right.value > value:
        node.right = rotate_right(node.right)
        node = rotate_left(node)
    return node, created


def _root_of(node: Node) -> Node:
    while node.parent is not None:
        node = node.parent
    return node


def avl_insert(root: Optional[Node], value: int) -> Optional[Node]:
    """Insert *value* into the AVL tree at *root* and return the new node.

    With no *root* the returned node is the root of a new tree.  Rotations
    may give the tree a new root, reachable by following parent links from
    any node.  A value already present is not inserted and None is returned.
    """
    if root is None:
        return Node(value)
    _, created = _insert(root, root.parent, value)
    return created


def array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree by inserting *values* in order, skipping repeats."""
    root: Optional[Node] = None
    for value in dict.fromkeys(values):
        created = avl_insert(root, value)
        if created is not None:
            root = _root_of(created)
    return root


def _rebalance(node: Optional[Node]) -> Optional[Node]:
    """Rebalance bottom-up with single rotations; return the subtree's root."""
    if node is None or is_leaf(node):
        return node
    node.left = _rebalance(node.left)
    node.right = _rebalance(node.right)
    factor = balance(node)
    if factor > 1:
        return rotate_right(node)
    if factor < -1:
        return rotate_left(node)
    return node


def avl_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove *value* from the AVL tree at *root*, rebalance, and return the new root.

    A value that is absent leaves the tree's contents unchanged; the tree is
    still rebalanced.
    """
    if root is None:
        return None
    try:
        root = bst_remove(root, value)
    except KeyError:
        pass
    return _rebalance(root)


def _build(parent: Optional[Node], items: list[int]) -> Optional[Node]:
    if not items:
        return None
    mid = (len(items) - 1) // 2
    node = Node(items[mid], parent)
    node.left = _build(node, items[:mid])
    node.right = _build(node, items[mid + 1:])
    return node


def sorted_array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build a balanced tree from sorted *values*, each middle value becoming a root."""
    return _build(None, list(values))