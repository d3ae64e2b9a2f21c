"""seqextras - Lazy sequence operators for Python iterables.

seqextras extends plain iterables with operators that the standard library
does not ship: forest flattening (depth-first or breadth-first, with or
without levels), comparer-driven extremum selection, batching, and a few
key-based helpers.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from seqextras import flatten, TraversalMode

    for node in flatten(roots, lambda n: n.children, TraversalMode.BREADTH_FIRST):
        ...
━━━━━━━━━━━━━━━━━━━━━━━━━━

Everything is pull-based and single-threaded: nothing is computed until
the caller iterates, and stopping iteration releases all state.
"""

import logging

__version__ = "0.1.0"

# Library stays silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .config import TraversalMode, FlattenConfig, parse_mode
from .errors import (
    SeqExtrasError,
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    EmptySequenceError,
)
from .core.comparer import (
    natural_compare,
    KeyComparer,
    EqualityComparer,
    KeyEqualityComparer,
)
from .core.traverser import (
    TreeTraverser,
    DepthFirstTraverser,
    BreadthFirstTraverser,
    create_traverser,
)
from .planning import FlattenPlan

# High-level API
from .api import (
    flatten,
    flatten_with_level,
    batch,
    maximum,
    minimum,
    maximum_or_default,
    minimum_or_default,
    max_by,
    min_by,
    max_by_or_default,
    min_by_or_default,
    distinct_by,
    sequence_equal_by,
    element_at_or_default,
)

__all__ = [
    '__version__',
    # Config
    'TraversalMode',
    'FlattenConfig',
    'parse_mode',
    # Errors
    'SeqExtrasError',
    'ArgumentError',
    'ArgumentNullError',
    'ArgumentOutOfRangeError',
    'EmptySequenceError',
    # Core
    'natural_compare',
    'KeyComparer',
    'EqualityComparer',
    'KeyEqualityComparer',
    'TreeTraverser',
    'DepthFirstTraverser',
    'BreadthFirstTraverser',
    'create_traverser',
    'FlattenPlan',
    # API
    'flatten',
    'flatten_with_level',
    'batch',
    'maximum',
    'minimum',
    'maximum_or_default',
    'minimum_or_default',
    'max_by',
    'min_by',
    'max_by_or_default',
    'min_by_or_default',
    'distinct_by',
    'sequence_equal_by',
    'element_at_or_default',
]
