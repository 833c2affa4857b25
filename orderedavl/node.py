from __future__ import annotations
from typing import Generic
from .keys import K

class Node(Generic[K]):
    __slots__ = ("key", "left", "right", "height", "count")

    def __init__(self, key: K):
        self.key = key
        self.left: Node[K] | None = None
        self.right: Node[K] | None = None
        # Inserted as a leaf
        self.height = 1
        self.count = 1

    def __repr__(self):
        return f"Node({self.key!r}, height={self.height})"

def height(x: Node | None) -> int:
    return x.height if x is not None else 0

def count(x: Node | None) -> int:
    return x.count if x is not None else 0

def update(x: Node):
    """Recomputes the cached height and subtree size of x from its children. Must be called whenever x's children change."""
    x.height = 1 + max(height(x.left), height(x.right))
    x.count = 1 + count(x.left) + count(x.right)

def balance_factor(x: Node | None) -> int:
    return height(x.left) - height(x.right) if x is not None else 0

def rotate_right(node: Node) -> Node:
    """Promotes node.left to the root of the subtree and returns it. node.left must not be None."""
    y = node.left
    assert y is not None
    node.left = y.right
    y.right = node
    update(node)
    update(y)
    return y

def rotate_left(node: Node) -> Node:
    """Promotes node.right to the root of the subtree and returns it. node.right must not be None."""
    y = node.right
    assert y is not None
    node.right = y.left
    y.left = node
    update(node)
    update(y)
    return y

def min_node(node: Node) -> Node:
    x = node
    while x.left is not None:
        x = x.left
    return x

def max_node(node: Node) -> Node:
    x = node
    while x.right is not None:
        x = x.right
    return x
