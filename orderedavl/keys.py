from __future__ import annotations
from typing import Any, Protocol, TypeVar

class Comparable(Protocol):
    """Anything with a consistent strict total order. Only `==` and `<` are ever used on keys, so a class defining just these two works."""
    def __eq__(self, other: Any, /) -> bool: ...
    def __lt__(self, other: Any, /) -> bool: ...

K = TypeVar('K', bound=Comparable)

def less(a: Comparable, b: Comparable) -> bool:
    return a < b

def equal(a: Comparable, b: Comparable) -> bool:
    return a == b
