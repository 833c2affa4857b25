from __future__ import annotations
from typing import TYPE_CHECKING
from ..errors import InvariantViolation
from ..keys import less
from ..node import Node, balance_factor, count, height

if TYPE_CHECKING:
    from ..avl import AVLTree

def _check_node(node: Node | None, lo: Node | None, hi: Node | None) -> int:
    # lo and hi are the nearest ancestors bounding this subtree, or None if unbounded
    if node is None:
        return 0
    if lo is not None and not less(lo.key, node.key):
        raise InvariantViolation(f"BST order broken: {node.key!r} is not greater than ancestor {lo.key!r}")
    if hi is not None and not less(node.key, hi.key):
        raise InvariantViolation(f"BST order broken: {node.key!r} is not less than ancestor {hi.key!r}")

    n = 1 + _check_node(node.left, lo, node) + _check_node(node.right, node, hi)

    expected_height = 1 + max(height(node.left), height(node.right))
    if node.height != expected_height:
        raise InvariantViolation(f"Cached height of {node.key!r} is {node.height}, expected {expected_height}")
    if node.count != n:
        raise InvariantViolation(f"Cached count of {node.key!r} is {node.count}, expected {n}")
    w = balance_factor(node)
    if w < -1 or w > 1:
        raise InvariantViolation(f"Balance factor of {node.key!r} is {w}")
    return n

def check_invariants(tree: AVLTree):
    """Walks the whole tree and raises InvariantViolation on the first broken property:
    key order, cached heights, cached counts, balance factors, or the size counter."""
    n = _check_node(tree.root, None, None)
    if tree.size() != n:
        raise InvariantViolation(f"Tree reports size {tree.size()} but holds {n} nodes")
    if count(tree.root) != n:
        raise InvariantViolation(f"Root count is {count(tree.root)} but tree holds {n} nodes")

def is_balanced(tree: AVLTree) -> bool:
    def balanced(node: Node | None) -> bool:
        if node is None:
            return True
        if abs(balance_factor(node)) > 1:
            return False
        return balanced(node.left) and balanced(node.right)
    return balanced(tree.root)
