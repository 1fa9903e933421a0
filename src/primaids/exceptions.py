"""
Exceptions raised by primaids helpers.

Two kinds of failure exist:
    - InvalidArgumentError: a supplied value has the wrong type or shape
    - OutOfBoundsError: a key is missing and strict behaviour was requested

Both derive from PrimaidsError so callers can catch everything from this
package in one place, and from the matching builtin (TypeError, LookupError)
so generic handlers keep working.
"""

from typing import Any, Optional


class PrimaidsError(Exception):
    """Base class for all primaids errors."""
    pass


class InvalidArgumentError(PrimaidsError, TypeError):
    """Raised when an argument violates a type or shape precondition."""
    pass


class OutOfBoundsError(PrimaidsError, LookupError):
    """
    Raised when a referenced key is absent in strict mode.

    Properties:
        key: The key (or path segment) that could not be found
    """

    def __init__(self, key: Any, message: Optional[str] = None):
        self.key = key
        super().__init__(message or f"'{key}' was not a valid key")
