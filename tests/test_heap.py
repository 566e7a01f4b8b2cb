import pytest

from treekit.heap import array_to_heap, heap_extract, heap_insert, heap_to_sorted_array, is_heap
from treekit.node import Node, insert_left, insert_right, levelorder, size


def _links_consistent(node, parent=None):
    if node is None:
        return True
    if node.parent is not parent:
        return False
    return _links_consistent(node.left, node) and _links_consistent(node.right, node)


SAMPLES = [
    [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95],
    [1, 2, 3, 4, 5, 6, 7, 8],
    [5, 5, 5, 1, 5],
    [-3, 0, -7, 12],
    [42],
]


def test_is_heap_empty_is_false():
    assert is_heap(None) is False


def test_is_heap_single_node():
    assert is_heap(Node(1)) is True


def test_is_heap_rejects_child_larger_than_parent():
    root = Node(10)
    insert_left(root, 20)
    assert is_heap(root) is False


def test_is_heap_rejects_incomplete_tree():
    root = Node(10)
    insert_right(root, 5)
    assert is_heap(root) is False


def test_is_heap_rejects_gap_in_last_level():
    root = Node(10)
    left = insert_left(root, 8)
    right = insert_right(root, 9)
    insert_left(right, 1)
    assert left.left is None
    assert is_heap(root) is False


def test_heap_insert_into_empty():
    node = heap_insert(None, 98)
    assert node.value == 98
    assert node.parent is None


def test_heap_insert_small_order():
    root = array_to_heap([1, 2, 3])
    assert list(levelorder(root)) == [3, 1, 2]


def test_heap_insert_new_maximum_reaches_root():
    root = array_to_heap([10, 5, 7])
    node = heap_insert(root, 100)
    assert node is root
    assert root.value == 100
    assert is_heap(root)


def test_heap_insert_small_value_stays_at_bottom():
    root = array_to_heap([10, 5, 7])
    node = heap_insert(root, 1)
    assert node.value == 1
    assert node.parent is not None and node.left is None and node.right is None
    assert is_heap(root)


@pytest.mark.parametrize("values", SAMPLES)
def test_array_to_heap_is_heap(values):
    root = array_to_heap(values)
    assert is_heap(root)
    assert size(root) == len(values)
    assert root.value == max(values)
    assert sorted(levelorder(root)) == sorted(values)
    assert _links_consistent(root)


def test_array_to_heap_empty():
    assert array_to_heap([]) is None


def test_heap_extract_empty_raises():
    with pytest.raises(IndexError):
        heap_extract(None)


def test_heap_extract_single_node():
    value, root = heap_extract(Node(7))
    assert value == 7
    assert root is None


@pytest.mark.parametrize("values", SAMPLES)
def test_heap_extract_returns_max_and_keeps_heap(values):
    root = array_to_heap(values)
    value, root = heap_extract(root)
    assert value == max(values)
    rest = list(values)
    rest.remove(value)
    if rest:
        assert is_heap(root)
        assert sorted(levelorder(root)) == sorted(rest)
        assert _links_consistent(root)
    else:
        assert root is None


@pytest.mark.parametrize("values", SAMPLES)
def test_heap_to_sorted_array_descending(values):
    assert heap_to_sorted_array(array_to_heap(values)) == sorted(values, reverse=True)


def test_heap_to_sorted_array_empty():
    assert heap_to_sorted_array(None) == []