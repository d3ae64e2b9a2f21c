"""Argument checks shared by the public operators."""

from typing import Any, Optional

from ..errors import ArgumentNullError, ArgumentOutOfRangeError


def check_not_none(value: Any, param_name: str) -> None:
    """Raise ArgumentNullError if value is None."""
    if value is None:
        raise ArgumentNullError(param_name)


def check_callable(value: Any, param_name: str) -> None:
    """Raise if value is None or cannot be called.

    Args:
        value: Candidate callable (key selector, accessor, comparer...)
        param_name: Parameter name reported in the error

    Raises:
        ArgumentNullError: If value is None
        TypeError: If value is not callable
    """
    check_not_none(value, param_name)
    if not callable(value):
        raise TypeError(
            f"Argument '{param_name}' must be callable, "
            f"got {type(value).__name__}"
        )


def check_in_range(value: Any,
                   param_name: str,
                   minimum: int,
                   maximum: Optional[int] = None) -> None:
    """Raise ArgumentOutOfRangeError unless minimum <= value <= maximum.

    Booleans are rejected even though they are ints.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ArgumentOutOfRangeError(
            param_name, value, minimum, maximum,
            message=f"Argument '{param_name}' must be an int, got {type(value).__name__}",
        )
    if value < minimum or (maximum is not None and value > maximum):
        raise ArgumentOutOfRangeError(param_name, value, minimum, maximum)
