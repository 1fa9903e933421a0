"""
Primaids: Primitive Aids for Python

Small, stateless helpers for two primitive data types:
    - Text values (primaids.strings)
    - Ordered key/value maps (primaids.arrays)

Every helper is a plain function over its arguments. Nothing is cached and
nothing is shared between calls. Helpers that mutate a map say so.
"""

from .arrays import (
    batch,
    format,
    get_and_call,
    get_and_unset,
    get_nested,
    group_by,
    rename,
    set_if_true,
    sub_set,
    to_ordered_map,
)
from .config import PrimaidsConfig, load_config
from .exceptions import InvalidArgumentError, OutOfBoundsError, PrimaidsError
from .strings import is_empty

__version__ = "0.1.0"

__all__ = [
    # Text helpers
    "is_empty",
    # Map helpers
    "batch",
    "format",
    "get_and_call",
    "get_and_unset",
    "get_nested",
    "group_by",
    "rename",
    "set_if_true",
    "sub_set",
    "to_ordered_map",
    # Configuration
    "PrimaidsConfig",
    "load_config",
    # Errors
    "PrimaidsError",
    "InvalidArgumentError",
    "OutOfBoundsError",
]
