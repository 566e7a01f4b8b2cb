"""Shape checks, common ancestors and rotations for binary trees."""

from __future__ import annotations

from collections import deque
from typing import Optional

from treekit.node import Node, depth, is_leaf


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node of *tree* has either zero or two children.

    An empty tree is not full.
    """
    if tree is None:
        return False
    stack = [tree]
    while stack:
        node = stack.pop()
        if (node.left is None) != (node.right is None):
            return False
        if node.left is not None:
            stack.append(node.left)
            stack.append(node.right)
    return True


def _first_leaf(tree: Node) -> Node:
    node = tree
    while not is_leaf(node):
        node = node.left if node.left is not None else node.right
    return node


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if *tree* is full and all of its leaves lie on one level.

    The level of each leaf is counted from *tree* and compared with the depth
    of its first leaf, which is measured from the root of the whole tree.
    An empty tree is not perfect.
    """
    if tree is None:
        return False
    target = depth(_first_leaf(tree))
    stack = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        if is_leaf(node):
            if level != target:
                return False
            continue
        if node.left is None or node.right is None:
            return False
        stack.append((node.right, level + 1))
        stack.append((node.left, level + 1))
    return True


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if *tree* is complete: every level filled, the last from the left.

    An empty tree is not complete.
    """
    if tree is None:
        return False
    queue = deque([tree])
    gap = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap = True
            elif gap:
                return False
            else:
                queue.append(child)
    return True


def lowest_common_ancestor(
    first: Optional[Node], second: Optional[Node]
) -> Optional[Node]:
    """Return the lowest node that is an ancestor of both nodes, or None."""
    while first is not None and second is not None:
        if first is second:
            return first
        mom, pop = first.parent, second.parent
        if (
            first is pop
            or mom is None
            or (mom.parent is None and pop is not None)
        ):
            second = pop
        elif (
            mom is second
            or pop is None
            or (pop.parent is None and mom is not None)
        ):
            first = mom
        else:
            first, second = mom, pop
    return None


def _reattach(parent: Optional[Node], old: Node, new: Node) -> None:
    new.parent = parent
    old.parent = new
    if parent is not None:
        if parent.left is old:
            parent.left = new
        else:
            parent.right = new


def rotate_left(tree: Optional[Node]) -> Node:
    """Rotate *tree* to the left and return the new root of the subtree.

    Raises ValueError if *tree* is missing or has no right child.
    """
    if tree is None or tree.right is None:
        raise ValueError("left rotation needs a node with a right child")
    pivot = tree.right
    parent = tree.parent
    tree.right = pivot.left
    if tree.right is not None:
        tree.right.parent = tree
    pivot.left = tree
    _reattach(parent, tree, pivot)
    return pivot


def rotate_right(tree: Optional[Node]) -> Node:
    """Rotate *tree* to the right and return the new root of the subtree.

    Raises ValueError if *tree* is missing or has no left child.
    """
    if tree is None or tree.left is None:
        raise ValueError("right rotation needs a node with a left child")
    pivot = tree.left
    parent = tree.parent
    tree.left = pivot.right
    if tree.left is not None:
        tree.left.parent = tree
    pivot.right = tree
    _reattach(parent, tree, pivot)
    return pivot