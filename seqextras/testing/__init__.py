"""Testing utilities for seqextras consumers."""

from .fixtures import (
    EnumerationGuard,
    ForbiddenEnumerationError,
    forbid_enumeration,
    forbid_multiple_enumeration,
)

__all__ = [
    'EnumerationGuard',
    'ForbiddenEnumerationError',
    'forbid_enumeration',
    'forbid_multiple_enumeration',
]
