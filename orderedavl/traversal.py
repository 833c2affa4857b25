from __future__ import annotations
from typing import Iterator
from .keys import K
from .node import Node

def in_order(node: Node[K] | None) -> Iterator[K]:
    """Yields keys left, self, right."""
    stack: list[Node[K]] = []
    x = node
    while stack or x is not None:
        while x is not None:
            stack.append(x)
            x = x.left
        x = stack.pop()
        yield x.key
        x = x.right

def pre_order(node: Node[K] | None) -> Iterator[K]:
    if node is None:
        return
    stack: list[Node[K]] = [node]
    while stack:
        x = stack.pop()
        yield x.key
        if x.right is not None:
            stack.append(x.right)
        if x.left is not None:
            stack.append(x.left)

def post_order(node: Node[K] | None) -> Iterator[K]:
    # Reverse of (self, right, left)
    if node is None:
        return
    stack: list[Node[K]] = [node]
    reversed_keys: list[K] = []
    while stack:
        x = stack.pop()
        reversed_keys.append(x.key)
        if x.left is not None:
            stack.append(x.left)
        if x.right is not None:
            stack.append(x.right)
    yield from reversed(reversed_keys)
