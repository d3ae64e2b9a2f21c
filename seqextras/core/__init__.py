"""Core algorithms for seqextras.

This package holds the traversal strategies, comparer adapters and the
single-pass scans that the public API in seqextras.api is built on.
"""

from .traverser import (
    TreeTraverser,
    DepthFirstTraverser,
    BreadthFirstTraverser,
    create_traverser,
)
from .comparer import (
    natural_compare,
    KeyComparer,
    EqualityComparer,
    KeyEqualityComparer,
)
from .extremum import find_extreme, MAXIMUM, MINIMUM
from .batching import iter_batches

__all__ = [
    "TreeTraverser",
    "DepthFirstTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
    "natural_compare",
    "KeyComparer",
    "EqualityComparer",
    "KeyEqualityComparer",
    "find_extreme",
    "MAXIMUM",
    "MINIMUM",
    "iter_batches",
]
