"""Comparer adapters for seqextras.

A comparer is any callable ``compare(x, y) -> int`` returning a negative
number, zero, or a positive number when x is less than, equal to, or
greater than y. Equality comparers are objects exposing ``equals(x, y)``
and ``hash(x)``.

The adapters here project items through a key function so that
operators like max_by or distinct_by can reuse the plain algorithms.
"""

import functools
from typing import Any, Callable, Optional

from .validation import check_callable


Comparer = Callable[[Any, Any], int]


def natural_compare(x: Any, y: Any) -> int:
    """Compare two items using their natural ordering."""
    return (x > y) - (x < y)


class KeyComparer:
    """Comparer that orders items by a projected key.

    Both items are passed through ``key`` and the resulting keys are
    compared with ``key_comparer`` (natural ordering by default).

    Example:
        >>> by_length = KeyComparer.by(len)
        >>> by_length("abc", "z")
        1
    """

    def __init__(self, key: Callable[[Any], Any], key_comparer: Optional[Comparer] = None):
        check_callable(key, "key")
        if key_comparer is not None:
            check_callable(key_comparer, "key_comparer")
        self.key = key
        self.key_comparer = key_comparer or natural_compare

    @classmethod
    def by(cls, key: Callable[[Any], Any], key_comparer: Optional[Comparer] = None) -> "KeyComparer":
        """Build a comparer that compares items by key."""
        return cls(key, key_comparer)

    def __call__(self, x: Any, y: Any) -> int:
        return self.key_comparer(self.key(x), self.key(y))

    def to_sort_key(self) -> Callable[[Any], Any]:
        """Return a key function so this comparer can drive sorted()."""
        return functools.cmp_to_key(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key={self.key!r})"


class EqualityComparer:
    """Default equality: ``==`` and the built-in ``hash``."""

    def equals(self, x: Any, y: Any) -> bool:
        return x == y

    def hash(self, x: Any) -> int:
        return hash(x)


class KeyEqualityComparer(EqualityComparer):
    """Equality comparer that compares items by a projected key.

    Keys are compared with ``key_comparer`` when given, default equality
    otherwise.
    """

    def __init__(self, key: Callable[[Any], Any],
                 key_comparer: Optional[EqualityComparer] = None):
        check_callable(key, "key")
        self.key = key
        self.key_comparer = key_comparer or EqualityComparer()

    @classmethod
    def by(cls, key: Callable[[Any], Any],
           key_comparer: Optional[EqualityComparer] = None) -> "KeyEqualityComparer":
        """Build an equality comparer that compares items by key."""
        return cls(key, key_comparer)

    def equals(self, x: Any, y: Any) -> bool:
        return self.key_comparer.equals(self.key(x), self.key(y))

    def hash(self, x: Any) -> int:
        return self.key_comparer.hash(self.key(x))


class _ComparedKey:
    """Hashable wrapper delegating __eq__ and __hash__ to a comparer.

    Lets a plain set track distinctness under a custom equality comparer.
    """

    __slots__ = ('value', 'comparer', '_hash')

    def __init__(self, value: Any, comparer: EqualityComparer):
        self.value = value
        self.comparer = comparer
        self._hash = comparer.hash(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _ComparedKey):
            return NotImplemented
        return self.comparer.equals(self.value, other.value)

    def __hash__(self) -> int:
        return self._hash
