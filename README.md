# redblack

`redblack` is a red-black tree that keeps its keys in sorted order. The tree rebalances itself when keys are added or removed. The same key can be stored more than once.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Usage

```python
from redblack.rbtree import RBTree

tree = RBTree()
for key in (10, 5, 8, 34, 5):
    tree.insert(key)

node = tree.find(8)      # a Node, or None if the key is absent
print(node.key)          # 8

print(tree.min().key)    # 5
print(tree.max().key)    # 34
print(len(tree))         # 5

tree.erase(tree.min())   # removes one of the two 5s
print(list(tree))        # [5, 8, 10, 34]
print(tree.to_list(2))   # the smallest two keys: [5, 8]
```

Keys can be any values that compare with `<`, `>=` and `==`, as long as all keys in one tree can be compared with each other.

## API

All names below are in `redblack.rbtree`.

### `RBTree`

- `insert(key)` adds `key` and returns the new `Node`. A key that is already present is added again as a separate node.
- `find(key)` returns a `Node` that holds `key`, or `None` if there is no such node. When the key is stored more than once, any one of its nodes may be returned.
- `min()` and `max()` return the node with the smallest or the largest key. On an empty tree they return `None`.
- `erase(node)` removes a node that this tree returned. It raises `ValueError` if the node has already been erased or is not a tree node.
- `to_list(n)` returns up to `n` keys in ascending order. It raises `ValueError` if `n` is negative.
- `len(tree)` is the number of keys stored, counting each duplicate.
- Iterating over a tree yields every key in ascending order.

### `Node`

A node has a `key` and a `color`. It also has `parent`, `left` and `right` links. A link with nothing to point to refers to the tree's shared `nil` sentinel, which is `tree.nil`. After a node is erased, all three of its links are `None`.

### `Color`

An enum with the members `Color.RED` and `Color.BLACK`.

## Running the tests

```
pytest
```