from __future__ import annotations
import warnings
from typing import Generic, Iterable, Iterator
from .errors import DuplicateKeyError, EmptyTreeError, KeyNotFoundError
from .keys import K, equal, less
from .node import Node, balance_factor, count, height, max_node, min_node, rotate_left, rotate_right, update
from . import traversal

def insert(node: Node[K] | None, key: K) -> Node[K]:
    """Inserts key into the subtree rooted at node and returns the new subtree root.

    Raises DuplicateKeyError if the key is already present. The error is raised before this level
    touches anything, so every ancestor frame is also left untouched."""
    if node is None:
        return Node(key)

    if less(key, node.key):
        node.left = insert(node.left, key)
    elif equal(key, node.key):
        raise DuplicateKeyError(key)
    else:
        node.right = insert(node.right, key)

    update(node)
    w = balance_factor(node)

    # Case is picked by comparing against the child's key
    if w > 1:
        assert node.left is not None
        if less(key, node.left.key):
            return rotate_right(node)
        node.left = rotate_left(node.left)
        return rotate_right(node)

    if w < -1:
        assert node.right is not None
        if less(node.right.key, key):
            return rotate_left(node)
        node.right = rotate_right(node.right)
        return rotate_left(node)

    return node

def delete(node: Node[K] | None, key: K) -> Node[K] | None:
    """Deletes key from the subtree rooted at node and returns the new subtree root, which may be None.

    Raises KeyNotFoundError if the key is not in the subtree."""
    if node is None:
        raise KeyNotFoundError(key)

    if less(key, node.key):
        node.left = delete(node.left, key)
    elif less(node.key, key):
        node.right = delete(node.right, key)
    elif node.left is None:
        return node.right
    elif node.right is None:
        return node.left
    else:
        # Two children: take over the successor's key, then remove the successor from the right subtree
        successor = min_node(node.right).key
        node.key = successor
        node.right = delete(node.right, successor)

    update(node)
    w = balance_factor(node)

    if w > 1:
        if balance_factor(node.left) >= 0:
            return rotate_right(node)
        assert node.left is not None
        node.left = rotate_left(node.left)
        return rotate_right(node)

    if w < -1:
        if balance_factor(node.right) <= 0:
            return rotate_left(node)
        assert node.right is not None
        node.right = rotate_right(node.right)
        return rotate_left(node)

    return node

class AVLTree(Generic[K]):
    """An ordered set of unique keys kept as an AVL tree.

    Insert, delete, membership, min/max and rank lookups are all O(log n) in the worst case.
    The tree is not thread safe: guard the whole instance with a lock if it is shared."""
    def __init__(self, keys: Iterable[K] | None = None):
        self.root: Node[K] | None = None
        self._size = 0
        if keys is not None:
            self.update(keys)

    def insert(self, key: K):
        """Inserts key. Raises DuplicateKeyError (and leaves the tree unchanged) if it is already present."""
        self.root = insert(self.root, key)
        self._size += 1

    def delete(self, key: K):
        """Deletes key. Raises KeyNotFoundError (and leaves the tree unchanged) if it is absent."""
        self.root = delete(self.root, key)
        self._size -= 1

    def discard(self, key: K) -> bool:
        """Deletes key if present. Returns whether anything was removed."""
        try:
            self.delete(key)
        except KeyNotFoundError:
            return False
        return True

    def update(self, keys: Iterable[K], strict: bool = True) -> int:
        """Inserts every key from keys and returns how many were inserted.

        If strict is True, the first duplicate raises DuplicateKeyError; the keys before it stay inserted.
        Otherwise duplicates are skipped and reported with a single warning."""
        inserted = 0
        skipped = 0
        for key in keys:
            try:
                self.insert(key)
            except DuplicateKeyError:
                if strict:
                    raise
                skipped += 1
                continue
            inserted += 1
        if skipped:
            warnings.warn(f"Skipped {skipped} duplicate key(s) while inserting {inserted + skipped} key(s)")
        return inserted

    def contains(self, key: K) -> bool:
        x = self.root
        while x is not None:
            if less(key, x.key):
                x = x.left
            elif less(x.key, key):
                x = x.right
            else:
                return True
        return False

    def min(self) -> K:
        if self.root is None:
            raise EmptyTreeError("min")
        return min_node(self.root).key

    def max(self) -> K:
        if self.root is None:
            raise EmptyTreeError("max")
        return max_node(self.root).key

    def pop_min(self) -> K:
        if self.root is None:
            raise EmptyTreeError("pop_min")
        key = min_node(self.root).key
        self.delete(key)
        return key

    def pop_max(self) -> K:
        if self.root is None:
            raise EmptyTreeError("pop_max")
        key = max_node(self.root).key
        self.delete(key)
        return key

    def height(self) -> int:
        return height(self.root)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self):
        self.root = None
        self._size = 0

    def in_order(self) -> list[K]:
        return list(traversal.in_order(self.root))

    def pre_order(self) -> list[K]:
        return list(traversal.pre_order(self.root))

    def post_order(self) -> list[K]:
        return list(traversal.post_order(self.root))

    def is_balanced(self) -> bool:
        from .util.verify import is_balanced
        return is_balanced(self)

    def render(self, indent: int = 4) -> str:
        from .display import render
        return render(self, indent=indent)

    def __contains__(self, key: K) -> bool:
        return self.contains(key)

    def __len__(self):
        return self._size

    def __iter__(self) -> Iterator[K]:
        return traversal.in_order(self.root)

    def __getitem__(self, idx: int) -> K:
        """Returns the idx-th smallest key. Negative indices count from the largest key."""
        n = count(self.root)
        if idx < 0:
            idx += n
        if idx < 0 or idx >= n:
            raise IndexError(f"Index {idx} out of range for tree of size {n}")
        x = self.root
        while x is not None:
            left_elem = count(x.left)
            if idx < left_elem:
                x = x.left
            elif idx == left_elem:
                return x.key
            else:
                idx -= left_elem + 1
                x = x.right
        raise IndexError(f"Index {idx} out of range for tree of size {n}")

    def __repr__(self):
        return f"AVLTree({self.in_order()})"

    def __str__(self):
        return f"AVLTree(size={self._size}, height={self.height()})"
