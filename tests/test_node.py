import pytest

from treekit.node import (
    Node,
    balance,
    depth,
    height,
    inorder,
    insert_left,
    insert_right,
    internal_nodes,
    is_leaf,
    is_root,
    leaves,
    levelorder,
    postorder,
    preorder,
    sibling,
    size,
    uncle,
)


@pytest.fixture
def tree():
    root = Node(98)
    n12 = insert_left(root, 12)
    n402 = insert_right(root, 402)
    n6 = insert_left(n12, 6)
    n56 = insert_right(n12, 56)
    n256 = insert_left(n402, 256)
    return {"root": root, 12: n12, 402: n402, 6: n6, 56: n56, 256: n256}


def test_new_node_has_no_links():
    node = Node(7)
    assert node.value == 7
    assert node.parent is None and node.left is None and node.right is None


def test_insert_left_pushes_existing_child_down(tree):
    root = tree["root"]
    new = insert_left(root, 54)
    assert root.left is new
    assert new.parent is root
    assert new.left is tree[12]
    assert tree[12].parent is new


def test_insert_right_pushes_existing_child_down(tree):
    root = tree["root"]
    new = insert_right(root, 128)
    assert root.right is new
    assert new.right is tree[402]
    assert tree[402].parent is new


def test_insert_under_missing_parent_raises():
    with pytest.raises(ValueError):
        insert_left(None, 1)
    with pytest.raises(ValueError):
        insert_right(None, 1)


def test_leaf_and_root(tree):
    assert is_leaf(tree[6]) is True
    assert is_leaf(tree["root"]) is False
    assert is_leaf(None) is False
    assert is_root(tree["root"]) is True
    assert is_root(tree[12]) is False
    assert is_root(None) is False


def test_preorder_pinned(tree):
    assert list(preorder(tree["root"])) == [98, 12, 6, 56, 402, 256]


def test_levelorder_pinned(tree):
    assert list(levelorder(tree["root"])) == [98, 12, 402, 6, 56, 256]


def test_inorder_is_sorted_for_search_shaped_tree(tree):
    values = list(inorder(tree["root"]))
    assert values == sorted(values)
    assert sorted(values) == sorted(preorder(tree["root"]))


def test_postorder_ends_with_root(tree):
    values = list(postorder(tree["root"]))
    assert values[-1] == tree["root"].value
    assert sorted(values) == sorted(levelorder(tree["root"]))
    assert values.index(6) < values.index(12)


@pytest.mark.parametrize("walk", [preorder, inorder, postorder, levelorder])
def test_traversals_of_empty_tree(walk):
    assert list(walk(None)) == []


def test_height_matches_deepest_node(tree):
    assert height(None) == 0
    assert height(tree[6]) == 0
    assert height(tree["root"]) == max(depth(n) for n in tree.values())


def test_depth_grows_by_one_per_level(tree):
    assert depth(tree["root"]) == 0
    assert depth(None) == 0
    assert depth(tree[56]) == depth(tree[12]) + 1


def test_counts(tree):
    assert size(tree["root"]) == len(tree)
    assert size(None) == 0
    assert leaves(tree["root"]) + internal_nodes(tree["root"]) == size(tree["root"])
    assert leaves(tree["root"]) == sum(1 for n in tree.values() if is_leaf(n))
    assert leaves(None) == 0 and internal_nodes(None) == 0


def test_balance_of_chains():
    left_root = Node(1)
    cur = left_root
    for value in (2, 3, 4):
        cur = insert_left(cur, value)
    assert balance(left_root) == size(left_root.left)

    right_root = Node(1)
    cur = right_root
    for value in (2, 3):
        cur = insert_right(cur, value)
    assert balance(right_root) == -size(right_root.right)


def test_balance_of_leaf_and_none(tree):
    assert balance(None) == 0
    assert balance(tree[6]) == 0
    assert balance(tree[402]) == size(tree[402].left)


def test_sibling_and_uncle(tree):
    assert sibling(tree[12]) is tree[402]
    assert sibling(tree[402]) is tree[12]
    assert sibling(tree["root"]) is None
    assert sibling(None) is None
    assert sibling(tree[256]) is None
    assert uncle(tree[6]) is tree[402]
    assert uncle(tree[256]) is tree[12]
    assert uncle(tree[12]) is None
    assert uncle(None) is None