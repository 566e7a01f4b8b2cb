"""Binary tree nodes and the basic queries and traversals over them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    value: int
    parent: Optional[Node] = None
    left: Optional[Node] = field(default=None)
    right: Optional[Node] = field(default=None)

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new left child of *parent*, pushing any existing left child down."""
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    new = Node(value, parent)
    if parent.left is not None:
        new.left = parent.left
        parent.left.parent = new
    parent.left = new
    return new


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new right child of *parent*, pushing any existing right child down."""
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    new = Node(value, parent)
    if parent.right is not None:
        new.right = parent.right
        parent.right.parent = new
    parent.right = new
    return new


def is_leaf(node: Optional[Node]) -> bool:
    """Return True if *node* exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """Return True if *node* exists and has no parent."""
    return node is not None and node.parent is None


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of *tree* in pre-order."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of *tree* in in-order."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of *tree* in post-order."""
    if tree is None:
        return
    stack: list[tuple[Node, bool]] = [(tree, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node.value
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def levelorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of *tree* level by level, left to right."""
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node.value
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 for None or a leaf."""
    if tree is None:
        return 0
    left = 1 + height(tree.left) if tree.left is not None else 0
    right = 1 + height(tree.right) if tree.right is not None else 0
    return max(left, right)


def depth(node: Optional[Node]) -> int:
    """Return the number of edges from *node* up to its root; 0 for None."""
    count = 0
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in *tree*."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of leaves in *tree*."""
    return sum(1 for node in _nodes(tree) if is_leaf(node))


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes in *tree* with at least one child."""
    return sum(1 for node in _nodes(tree) if not is_leaf(node))


def _levels(tree: Optional[Node]) -> int:
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def balance(tree: Optional[Node]) -> int:
    """Return the balance factor of *tree*: left subtree height minus right."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of *node*'s parent, or None."""
    if node is None or node.parent is None:
        return None
    if node.parent.left is node:
        return node.parent.right
    return node.parent.left


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of *node*'s parent, or None."""
    if node is None:
        return None
    return sibling(node.parent)