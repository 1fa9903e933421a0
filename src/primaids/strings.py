"""Helpers for working with text values."""

from typing import Optional

from primaids.exceptions import InvalidArgumentError


def is_empty(value: Optional[str]) -> bool:
    """
    Return True if the given value is None or contains only whitespace.

    Args:
        value: The text to check, or None

    Returns:
        True for None, "" and whitespace-only text; False otherwise

    Raises:
        InvalidArgumentError: If value is neither None nor a string

    Example:
        >>> is_empty("\\t\\n ")
        True
        >>> is_empty("a")
        False
    """
    if value is None:
        return True

    if isinstance(value, str):
        return value.strip() == ""

    raise InvalidArgumentError("value was not None or a string")
