"""Exception types raised by seqextras operators.

All failures are raised synchronously to the immediate caller. Nothing in
the library retries, swallows or logs them.
"""

from typing import Any, Optional


class SeqExtrasError(Exception):
    """Base class for every error raised by seqextras."""
    pass


class ArgumentError(SeqExtrasError, ValueError):
    """Raised when an argument is unusable.

    Attributes:
        param_name: Name of the offending parameter
    """

    def __init__(self, message: str, param_name: Optional[str] = None):
        super().__init__(message)
        self.param_name = param_name


class ArgumentNullError(ArgumentError, TypeError):
    """Raised when a required argument was None."""

    def __init__(self, param_name: str):
        super().__init__(f"Argument '{param_name}' must not be None", param_name)


class ArgumentOutOfRangeError(ArgumentError):
    """Raised when an argument is outside its valid domain.

    Covers numeric ranges (e.g. a batch size below 1) and enumerated
    values that are not part of their enum (e.g. an unknown traversal mode).
    """

    def __init__(self,
                 param_name: str,
                 value: Any,
                 minimum: Optional[int] = None,
                 maximum: Optional[int] = None,
                 message: Optional[str] = None):
        if message is None:
            if minimum is not None and maximum is not None:
                message = (
                    f"Argument '{param_name}' must be between {minimum} "
                    f"and {maximum}, got {value!r}"
                )
            elif minimum is not None:
                message = (
                    f"Argument '{param_name}' must be at least {minimum}, "
                    f"got {value!r}"
                )
            else:
                message = f"Argument '{param_name}' has an invalid value {value!r}"
        super().__init__(message, param_name)
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class EmptySequenceError(SeqExtrasError, ValueError):
    """Raised when an operation needs at least one element but got none."""

    def __init__(self, message: str = "Sequence contains no elements"):
        super().__init__(message)
