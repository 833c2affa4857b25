from .avl import AVLTree
from .keys import Comparable
from .errors import AVLError, DuplicateKeyError, KeyNotFoundError, EmptyTreeError, InvariantViolation
