"""High-level API for seqextras.

This module provides the functional entry points of the library. Every
function validates its arguments eagerly, when it is called, and then
delegates to the algorithms in seqextras.core. Operators returning
iterables are lazy: the source is only consumed as results are pulled.
"""

import sys
from collections.abc import Sequence
from itertools import islice
from typing import Any, Callable, Iterable, Iterator, List, Optional, Union

from .config import FlattenConfig, TraversalMode, parse_mode
from .core.batching import iter_batches
from .core.comparer import (
    Comparer,
    EqualityComparer,
    KeyComparer,
    KeyEqualityComparer,
    _ComparedKey,
)
from .core.extremum import MAXIMUM, MINIMUM, find_extreme
from .core.traverser import ChildrenAccessor
from .core.validation import check_callable, check_in_range, check_not_none
from .planning import FlattenPlan


# Flattening

def flatten(
    roots: Iterable[Any],
    children: ChildrenAccessor,
    mode: Union[TraversalMode, str],
    selector: Optional[Callable[[Any], Any]] = None,
) -> FlattenPlan:
    """Flatten a forest into a single lazy sequence.

    Args:
        roots: Root nodes of the forest
        children: Callable returning an iterable of a node's children
        mode: TraversalMode.DEPTH_FIRST or TraversalMode.BREADTH_FIRST
            (or a string alias such as 'dfs' / 'bfs')
        selector: Maps each visited node to a result; nodes are yielded
            as-is when omitted

    Returns:
        Restartable lazy iterable of nodes, or of selector results

    Raises:
        ArgumentNullError: If roots or children is None
        ArgumentOutOfRangeError: If mode is not a known traversal mode

    Example:
        >>> tree = {1: [2, 3], 2: [], 3: [4], 4: []}
        >>> list(flatten([1], tree.get, TraversalMode.DEPTH_FIRST))
        [1, 2, 3, 4]
    """
    return _build_plan(roots, children, mode, selector, include_level=False)


def flatten_with_level(
    roots: Iterable[Any],
    children: ChildrenAccessor,
    mode: Union[TraversalMode, str],
    selector: Optional[Callable[[Any, int], Any]] = None,
) -> FlattenPlan:
    """Flatten a forest, passing each node's level to the selector.

    Roots are at level 0 and every child is one level below its parent.
    Order and levels are the same as for flatten().

    Args:
        roots: Root nodes of the forest
        children: Callable returning an iterable of a node's children
        mode: Traversal mode or string alias
        selector: Called as selector(node, level); (node, level) tuples
            are yielded when omitted

    Returns:
        Restartable lazy iterable of selector results

    Example:
        >>> tree = {1: [2], 2: []}
        >>> list(flatten_with_level([1], tree.get, 'bfs'))
        [(1, 0), (2, 1)]
    """
    return _build_plan(roots, children, mode, selector, include_level=True)


def _build_plan(roots, children, mode, selector, include_level: bool) -> FlattenPlan:
    check_not_none(roots, "roots")
    check_callable(children, "children")
    if selector is not None:
        check_callable(selector, "selector")

    config = FlattenConfig(
        mode=parse_mode(mode, "mode"),
        selector=selector,
        include_level=include_level,
    )
    return FlattenPlan(roots, children, config)


# Batching

def batch(source: Iterable[Any], size: int) -> Iterator[List[Any]]:
    """Split source into lists of ``size`` consecutive items.

    The last batch is shorter when the source runs out; no batch is ever
    empty. Batches become available as soon as they are full.

    Raises:
        ArgumentNullError: If source is None
        ArgumentOutOfRangeError: If size is not an int >= 1

    Example:
        >>> list(batch([1, 2, 3, 4, 5], 2))
        [[1, 2], [3, 4], [5]]
    """
    check_not_none(source, "source")
    check_in_range(size, "size", 1, sys.maxsize)
    return iter_batches(source, size)


# Extremum selection

def maximum(source: Iterable[Any], comparer: Optional[Comparer] = None) -> Any:
    """Return the maximum item of source.

    Among equal items, the first one wins.

    Args:
        source: Items to scan
        comparer: compare(x, y) -> int; natural ordering when omitted

    Raises:
        EmptySequenceError: If source is empty
    """
    _check_extreme_args(source, comparer)
    return find_extreme(source, comparer, MAXIMUM)


def minimum(source: Iterable[Any], comparer: Optional[Comparer] = None) -> Any:
    """Return the minimum item of source. See maximum()."""
    _check_extreme_args(source, comparer)
    return find_extreme(source, comparer, MINIMUM)


def maximum_or_default(source: Iterable[Any],
                       comparer: Optional[Comparer] = None,
                       default: Any = None) -> Any:
    """Return the maximum item of source, or default if it is empty."""
    _check_extreme_args(source, comparer)
    return find_extreme(source, comparer, MAXIMUM, default)


def minimum_or_default(source: Iterable[Any],
                       comparer: Optional[Comparer] = None,
                       default: Any = None) -> Any:
    """Return the minimum item of source, or default if it is empty."""
    _check_extreme_args(source, comparer)
    return find_extreme(source, comparer, MINIMUM, default)


def max_by(source: Iterable[Any],
           key: Callable[[Any], Any],
           key_comparer: Optional[Comparer] = None) -> Any:
    """Return the item of source with the maximum key.

    Args:
        source: Items to scan
        key: Projects an item to the key it is compared by
        key_comparer: Comparer for keys; natural ordering when omitted

    Raises:
        EmptySequenceError: If source is empty

    Example:
        >>> max_by(["hello", "!", "ok"], len)
        'hello'
    """
    check_not_none(source, "source")
    return maximum(source, KeyComparer.by(key, key_comparer))


def min_by(source: Iterable[Any],
           key: Callable[[Any], Any],
           key_comparer: Optional[Comparer] = None) -> Any:
    """Return the item of source with the minimum key. See max_by()."""
    check_not_none(source, "source")
    return minimum(source, KeyComparer.by(key, key_comparer))


def max_by_or_default(source: Iterable[Any],
                      key: Callable[[Any], Any],
                      key_comparer: Optional[Comparer] = None,
                      default: Any = None) -> Any:
    """Return the item with the maximum key, or default if source is empty."""
    check_not_none(source, "source")
    return maximum_or_default(source, KeyComparer.by(key, key_comparer), default)


def min_by_or_default(source: Iterable[Any],
                      key: Callable[[Any], Any],
                      key_comparer: Optional[Comparer] = None,
                      default: Any = None) -> Any:
    """Return the item with the minimum key, or default if source is empty."""
    check_not_none(source, "source")
    return minimum_or_default(source, KeyComparer.by(key, key_comparer), default)


def _check_extreme_args(source, comparer) -> None:
    check_not_none(source, "source")
    if comparer is not None:
        check_callable(comparer, "comparer")


# Key-based set and element operators

def distinct_by(source: Iterable[Any],
                key: Callable[[Any], Any],
                key_comparer: Optional[EqualityComparer] = None) -> Iterator[Any]:
    """Yield the first item of source for each distinct key.

    Args:
        source: Items to filter
        key: Projects an item to the key used for distinctness
        key_comparer: Equality comparer for keys; == and hash() when omitted

    Example:
        >>> list(distinct_by([(0, 1), (0, 2), (1, 3)], lambda p: p[0]))
        [(0, 1), (1, 3)]
    """
    check_not_none(source, "source")
    check_callable(key, "key")
    return _distinct_by(source, key, key_comparer or EqualityComparer())


def _distinct_by(source, key, key_comparer: EqualityComparer) -> Iterator[Any]:
    seen = set()
    for item in source:
        marker = _ComparedKey(key(item), key_comparer)
        if marker not in seen:
            seen.add(marker)
            yield item


def sequence_equal_by(source: Iterable[Any],
                      other: Iterable[Any],
                      key: Callable[[Any], Any],
                      key_comparer: Optional[EqualityComparer] = None) -> bool:
    """Check whether two sequences have the same length and equal keys.

    Both sequences are walked in lockstep and at most once; the walk stops
    at the first mismatch.

    Example:
        >>> sequence_equal_by(["hello", "!"], ["world", "?"], len)
        True
    """
    check_not_none(source, "source")
    check_not_none(other, "other")
    comparer = KeyEqualityComparer.by(key, key_comparer)

    missing = object()
    left_items = iter(source)
    right_items = iter(other)
    while True:
        left = next(left_items, missing)
        right = next(right_items, missing)
        if left is missing or right is missing:
            return left is missing and right is missing
        if not comparer.equals(left, right):
            return False


def element_at_or_default(source: Iterable[Any], index: int, default: Any = None) -> Any:
    """Return the item at index, or default when source is too short.

    Indexable sequences are accessed directly; other iterables are walked
    up to index.

    Raises:
        ArgumentNullError: If source is None
        ArgumentOutOfRangeError: If index is negative

    Example:
        >>> element_at_or_default([1, 2, 3], 5, 42)
        42
    """
    check_not_none(source, "source")
    check_in_range(index, "index", 0)

    if isinstance(source, Sequence):
        return source[index] if index < len(source) else default

    return next(islice(source, index, None), default)
