import pytest
from orderedavl import AVLTree, DuplicateKeyError, KeyNotFoundError, EmptyTreeError, InvariantViolation, AVLError
from orderedavl.util import check_invariants, is_balanced
from orderedavl.display import render, display_tree
from orderedavl.node import Node, update

def test_check_invariants_passes_on_valid_tree():
    tree = AVLTree(range(100))
    check_invariants(tree)
    assert is_balanced(tree)
    assert tree.is_balanced()

def test_check_invariants_detects_stale_height():
    tree = AVLTree(range(7))
    assert tree.root is not None
    tree.root.height = 10
    with pytest.raises(InvariantViolation, match="height"):
        check_invariants(tree)

def test_check_invariants_detects_size_mismatch():
    tree = AVLTree(range(7))
    tree._size = 8
    with pytest.raises(InvariantViolation, match="size"):
        check_invariants(tree)

def test_check_invariants_detects_order():
    tree = AVLTree([2, 1, 3])
    assert tree.root is not None
    tree.root.left.key = 5
    with pytest.raises(InvariantViolation, match="order"):
        check_invariants(tree)

def test_unbalanced_graph_detected():
    # Wire an unbalanced chain by hand
    tree = AVLTree()
    root = Node(1)
    root.right = Node(2)
    root.right.right = Node(3)
    update(root.right.right)
    update(root.right)
    update(root)
    tree.root = root
    tree._size = 3
    assert not is_balanced(tree)
    with pytest.raises(InvariantViolation, match="Balance factor"):
        check_invariants(tree)

def test_update_strict():
    tree = AVLTree()
    with pytest.raises(DuplicateKeyError):
        tree.update([1, 2, 2, 3])
    assert tree.in_order() == [1, 2]

def test_update_skips_duplicates_with_warning():
    tree = AVLTree()
    with pytest.warns(UserWarning, match="Skipped 2 duplicate"):
        inserted = tree.update([1, 2, 2, 3, 1], strict=False)
    assert inserted == 3
    assert tree.in_order() == [1, 2, 3]

def test_discard():
    tree = AVLTree([1, 2])
    assert tree.discard(1)
    assert not tree.discard(1)
    assert tree.in_order() == [2]

def test_error_hierarchy():
    assert issubclass(DuplicateKeyError, KeyError)
    assert issubclass(KeyNotFoundError, KeyError)
    assert issubclass(EmptyTreeError, ValueError)
    for cls in (DuplicateKeyError, KeyNotFoundError, EmptyTreeError, InvariantViolation):
        assert issubclass(cls, AVLError)

def test_error_messages():
    assert str(DuplicateKeyError(42)) == "Key 42 already exists in the tree"
    assert str(KeyNotFoundError("x")) == "Key 'x' does not exist in the tree"
    assert str(EmptyTreeError("min")) == "min() called on an empty tree"

def test_render():
    tree = AVLTree([2, 1, 3])
    assert render(tree) == "    3\n2\n    1"
    assert tree.render(indent=2) == "  3\n2\n  1"
    assert render(AVLTree()) == "<empty>"

def test_display_tree_prints(capsys):
    tree = AVLTree([2, 1, 3])
    text = display_tree(tree)
    assert capsys.readouterr().out == text + "\n"
    assert display_tree(tree, skip_display=True) == text
    assert capsys.readouterr().out == ""
