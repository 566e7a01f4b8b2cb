# treekit

A small library of binary tree structures made of linked `Node` objects.
Each `Node` holds an integer `value` and links to its `parent`, `left` and
`right` nodes. All the functions work directly on these nodes; there is no
wrapper class around a whole tree.

## What it covers

- **Plain binary trees** (`treekit.node`): `Node`, `insert_left`,
  `insert_right` (an existing child is pushed one level down under the new
  node), `is_leaf`, `is_root`, the traversals `preorder`, `inorder`,
  `postorder` and `levelorder`, `height`, `depth`, `size`, `leaves`,
  `internal_nodes`, `balance`, `sibling` and `uncle`.
- **Shape checks and rotations** (`treekit.analysis`): `is_full`,
  `is_perfect`, `is_complete`, `lowest_common_ancestor`, `rotate_left` and
  `rotate_right`.
- **Binary search trees** (`treekit.bst`): `is_bst`, `bst_insert`,
  `array_to_bst`, `bst_search` and `bst_remove`.
- **AVL trees** (`treekit.avl`): `is_avl`, `avl_insert`, `array_to_avl`,
  `avl_remove` and `sorted_array_to_avl`.
- **Max binary heaps** (`treekit.heap`): `is_heap`, `heap_insert`,
  `array_to_heap`, `heap_extract` and `heap_to_sorted_array`.
- **Printing** (`treekit.printing`): `render` returns an ASCII drawing of a
  tree as a string, one line per level, with each value shown as `(098)`;
  `print_tree` writes that drawing to a file, standard output by default.

## Installation

```
pip install .
```

## Examples

Binary search trees:

```python
from treekit.bst import array_to_bst, bst_search, bst_remove
from treekit.node import inorder, height
from treekit.printing import print_tree

root = array_to_bst([98, 402, 12, 46, 128, 256, 512, 1, 2, 60])
print_tree(root)
print(list(inorder(root)))
print(height(root))

node = bst_search(root, 128)
root = bst_remove(root, 128)
```

`array_to_bst` skips repeated values. `bst_insert(root, value)` returns the
new node, or `None` when the value is already in the tree. `bst_remove`
returns the new root and raises `KeyError` when the value is absent.

AVL trees:

```python
from treekit.avl import array_to_avl, avl_remove, is_avl

tree = array_to_avl([98, 402, 12, 46, 128, 256, 512, 1, 2, 60])
assert is_avl(tree)
tree = avl_remove(tree, 46)
```

`avl_insert(root, value)` returns the node it created (or `None` for a
repeated value); rotations may move the root, and the current root can be
found by following `parent` links upward from any node.
`sorted_array_to_avl` builds a balanced tree from an already sorted
sequence.

Heaps:

```python
from treekit.heap import array_to_heap, heap_extract, heap_to_sorted_array

heap = array_to_heap([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
largest, heap = heap_extract(heap)
print(largest)
print(heap_to_sorted_array(heap))
```

`heap_extract` returns the largest value together with the root of the
remaining heap (`None` once it is empty) and raises `IndexError` on an empty
heap. `heap_to_sorted_array` empties the heap and returns its values in
descending order.

Traversal functions (`preorder`, `inorder`, `postorder`, `levelorder`) are
generators yielding node values, so they work anywhere an iterable is
accepted.

## Errors

- `insert_left` and `insert_right` raise `ValueError` when the parent is
  `None`.
- `rotate_left` and `rotate_right` raise `ValueError` when the node is
  missing or has no child on the side being rotated up.

## What it does not do

treekit is a library only: it has no command-line program, and trees live
in memory with no way to save or load them.

## Running the tests

```
pip install .[test]
pytest
```