from __future__ import annotations
from typing import Any

class AVLError(Exception):
    """Base class for every error raised by the tree."""
    pass

class DuplicateKeyError(AVLError, KeyError):
    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"Key {key!r} already exists in the tree")

    def __str__(self):
        return self.args[0]

class KeyNotFoundError(AVLError, KeyError):
    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"Key {key!r} does not exist in the tree")

    def __str__(self):
        return self.args[0]

class EmptyTreeError(AVLError, ValueError):
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}() called on an empty tree")

class InvariantViolation(AVLError, AssertionError):
    """Raised by the diagnostic checks when the node graph is not a valid AVL tree."""
    pass
