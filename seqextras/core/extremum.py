"""Single-pass extremum selection."""

from typing import Any, Iterable, Optional

from ..errors import EmptySequenceError
from .comparer import Comparer, natural_compare

MAXIMUM = 1
MINIMUM = -1

_NO_DEFAULT = object()


def find_extreme(source: Iterable[Any],
                 comparer: Optional[Comparer],
                 sign: int,
                 default: Any = _NO_DEFAULT) -> Any:
    """Return the maximum (sign=1) or minimum (sign=-1) item of source.

    An item replaces the running candidate only when it is strictly better,
    so among equal items the first one encountered wins.

    Args:
        source: Items to scan, consumed once
        comparer: Comparer for items, natural ordering when None
        sign: MAXIMUM or MINIMUM
        default: Returned for an empty source; when omitted an empty
            source raises EmptySequenceError

    Raises:
        EmptySequenceError: If source is empty and no default was given
    """
    compare = comparer or natural_compare
    iterator = iter(source)

    try:
        extreme = next(iterator)
    except StopIteration:
        if default is _NO_DEFAULT:
            raise EmptySequenceError() from None
        return default

    for item in iterator:
        if sign * compare(item, extreme) > 0:
            extreme = item

    return extreme
