"""Test fixtures for seqextras consumers.

These wrappers make enumeration mistakes visible in test suites: an
operator that should be lazy must not touch a source it was only handed,
and a single-pass operator must not walk its source twice.
"""

from typing import Any, Iterable, Iterator

from ..errors import SeqExtrasError


class ForbiddenEnumerationError(SeqExtrasError):
    """Raised when a guarded iterable is enumerated against its policy."""
    pass


class EnumerationGuard:
    """Iterable wrapper that limits how many times it can be enumerated.

    Example:
        source = forbid_multiple_enumeration([1, 2, 3])
        assert list(source) == [1, 2, 3]
        list(source)  # raises ForbiddenEnumerationError

    Attributes:
        max_enumerations: Number of iter() calls allowed
        enumerations: Number of iter() calls made so far
        items_pulled: Number of items handed out across all enumerations
    """

    def __init__(self, items: Iterable[Any], max_enumerations: int):
        self._items = items
        self.max_enumerations = max_enumerations
        self.enumerations = 0
        self.items_pulled = 0

    def __iter__(self) -> Iterator[Any]:
        if self.enumerations >= self.max_enumerations:
            if self.max_enumerations == 0:
                raise ForbiddenEnumerationError("Sequence must not be enumerated")
            raise ForbiddenEnumerationError("Sequence must not be enumerated more than once")
        self.enumerations += 1
        return self._counting_iter()

    def _counting_iter(self) -> Iterator[Any]:
        for item in self._items:
            self.items_pulled += 1
            yield item


def forbid_enumeration(items: Iterable[Any]) -> EnumerationGuard:
    """Wrap items so that any enumeration raises ForbiddenEnumerationError."""
    return EnumerationGuard(items, max_enumerations=0)


def forbid_multiple_enumeration(items: Iterable[Any]) -> EnumerationGuard:
    """Wrap items so that a second enumeration raises ForbiddenEnumerationError."""
    return EnumerationGuard(items, max_enumerations=1)
