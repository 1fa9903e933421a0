"""
Helpers for working with ordered key/value maps.

Maps are plain dicts, which keep insertion order. Keys are text or
non-negative integers. Read-only helpers also accept a list or tuple and
treat it as a map from position to element, which is the same shape
`to_ordered_map` produces.

Helpers that mutate (get_and_unset, rename, set_if_true) change the
caller's map in place. They require a real mapping: removing an entry
from a list would shift every later index, so list data must go through
`to_ordered_map` first.

None is the absent marker throughout.
"""

from __future__ import annotations

import logging
import re
import warnings
from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any, Callable, Dict, Iterable, Iterator, List, Tuple, Union

from primaids.exceptions import InvalidArgumentError, OutOfBoundsError


logger = logging.getLogger(__name__)

Key = Union[str, int]

_MISSING = object()

# Text segments that address an integer key ("0", "12"; not "01" or "+1")
_INTEGER_SEGMENT_RE = re.compile(r"^(0|[1-9][0-9]*)$")


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _require_collection(array: Any) -> None:
    if not isinstance(array, Mapping) and not _is_sequence(array):
        raise InvalidArgumentError(
            f"expected a mapping or sequence, got {type(array).__name__}"
        )


def _items(array: Any) -> Iterator[Tuple[Any, Any]]:
    """Iterate (key, value) pairs of a mapping or list-as-map."""
    _require_collection(array)
    if isinstance(array, Mapping):
        return iter(array.items())
    return enumerate(array)


def _require_mutable(array: Any) -> None:
    if not isinstance(array, MutableMapping):
        raise InvalidArgumentError(
            f"expected a mutable mapping, got {type(array).__name__}; "
            "use to_ordered_map() to convert list data"
        )


def _lookup(container: Any, key: Any) -> Any:
    """Return container[key], or _MISSING when the key is not present."""
    if isinstance(container, Mapping):
        if key in container:
            return container[key]
        return _MISSING
    if _is_sequence(container) and isinstance(key, int) and not isinstance(key, bool):
        if 0 <= key < len(container):
            return container[key]
    return _MISSING


def _lookup_segment(container: Any, segment: str) -> Any:
    value = _lookup(container, segment)
    if value is _MISSING and _INTEGER_SEGMENT_RE.match(segment):
        value = _lookup(container, int(segment))
    return value


def _missing(key: Any, operation: str) -> OutOfBoundsError:
    logger.debug("%s: key %r not found in strict mode", operation, key)
    return OutOfBoundsError(key)


def to_ordered_map(values: Union[Mapping, Sequence]) -> Dict[Any, Any]:
    """
    Return a new dict holding the entries of `values`.

    Mappings are copied in iteration order. Lists and tuples become
    {index: element}, so that later removals leave gaps instead of
    renumbering.

    Raises:
        InvalidArgumentError: If values is not a mapping or sequence
            (text and bytes are rejected)
    """
    return dict(_items(values))


def format(
    array: Union[Mapping, Sequence],
    template: str,
    key_placeholder: str = "{key}",
    value_placeholder: str = "{value}",
) -> str:
    """
    Render every entry of `array` through `template` and join the results.

    For each entry, occurrences of `key_placeholder` are replaced with the
    key, then occurrences of `value_placeholder` with the value. Both are
    converted with str(). An empty placeholder is not substituted.

    Example:
        >>> prices = {"oranges": 0.69, "bananas": 0.79}
        >>> format(prices, "Fruit: {key} only {value} per pound\\n")
        'Fruit: oranges only 0.69 per pound\\nFruit: bananas only 0.79 per pound\\n'

    Args:
        array: The map to render
        template: Text rendered once per entry
        key_placeholder: Marker replaced with the entry key
        value_placeholder: Marker replaced with the entry value

    Returns:
        The concatenated text, "" for an empty map
    """
    if not key_placeholder or not value_placeholder:
        warnings.warn(
            "Empty placeholder given to format(); it will not be substituted",
            UserWarning,
            stacklevel=2,
        )

    parts: List[str] = []
    for key, value in _items(array):
        text = template
        if key_placeholder:
            text = text.replace(key_placeholder, str(key))
        if value_placeholder:
            text = text.replace(value_placeholder, str(value))
        parts.append(text)
    return "".join(parts)


def get_and_unset(array: MutableMapping, key: Key) -> Any:
    """
    Remove `key` from `array` and return its value.

    Returns None and leaves the map untouched when the key is missing.

    Example:
        >>> letters = {0: "a", 1: "b", 2: "c"}
        >>> get_and_unset(letters, 1)
        'b'
        >>> letters
        {0: 'a', 2: 'c'}
    """
    _require_mutable(array)
    return array.pop(key, None)


def get_and_call(
    array: Union[Mapping, Sequence],
    key: Key,
    func: Callable[[Any], Any],
    strict: bool = False,
) -> Any:
    """
    Call `func` with the value at `key` and return its result.

    Args:
        array: The map to read
        key: Key of the value passed to func
        func: Unary callable
        strict: Raise instead of returning None when key is missing

    Returns:
        func(array[key]), or None if the key is missing and not strict

    Raises:
        InvalidArgumentError: If func is not callable
        OutOfBoundsError: If key is missing and strict is True
    """
    if not callable(func):
        raise InvalidArgumentError("func must be callable")

    _require_collection(array)
    value = _lookup(array, key)
    if value is _MISSING:
        if strict:
            raise _missing(key, "get_and_call")
        return None
    return func(value)


def get_nested(
    array: Union[Mapping, Sequence],
    path: str,
    delimiter: str = ".",
    strict: bool = False,
) -> Any:
    """
    Follow a delimited key path into nested maps and return the final value.

    Each segment is looked up as text first; a segment such as "0" or "12"
    that misses is retried as an integer key. Lists along the way are
    indexed by integer segments.

    Example:
        >>> config = {"db": {"host": "localhost", "login": {"username": "scott"}}}
        >>> get_nested(config, "db.login.username")
        'scott'
        >>> get_nested(config, "db.notfound.username") is None
        True

    Args:
        array: Root map
        path: Keys joined by `delimiter`; a path without the delimiter is a
            single key lookup
        delimiter: Separator between keys
        strict: Raise instead of returning None on the first missing segment

    Raises:
        InvalidArgumentError: If path is not text or delimiter is empty
        OutOfBoundsError: If a segment is missing and strict is True
    """
    if not isinstance(path, str):
        raise InvalidArgumentError("path must be a string")
    if not delimiter:
        raise InvalidArgumentError("delimiter must be a non-empty string")

    _require_collection(array)
    cursor = array
    for segment in path.split(delimiter):
        value = _lookup_segment(cursor, segment)
        if value is _MISSING:
            if strict:
                raise _missing(segment, "get_nested")
            return None
        cursor = value

    return cursor


def rename(
    array: MutableMapping,
    source_key: Key,
    destination_key: Key,
    strict: bool = False,
) -> None:
    """
    Move the value at `source_key` to `destination_key`.

    A new destination key is appended to the end of the iteration order;
    an existing one is overwritten where it stands.

    Example:
        >>> letters = {0: "a", 1: "b"}
        >>> rename(letters, 0, 2)
        >>> letters
        {1: 'b', 2: 'a'}

    Raises:
        OutOfBoundsError: If source_key is missing and strict is True
    """
    _require_mutable(array)
    if source_key not in array:
        if strict:
            raise _missing(source_key, "rename")
        return

    if source_key == destination_key:
        return

    array[destination_key] = array.pop(source_key)


def set_if_true(array: MutableMapping, key: Key, value: Any, expression: Any) -> None:
    """Set array[key] = value when `expression` is truthy."""
    _require_mutable(array)
    if expression:
        array[key] = value


def group_by(records: Union[Iterable[Mapping], Mapping], key: Key) -> Dict[Any, List[Dict[Any, Any]]]:
    """
    Group records by the value they hold under `key`.

    Each record is copied and the discriminator removed from the copy (the
    input records are not modified). Records without the key are grouped
    under None. Groups appear in the order their value is first seen.

    Example:
        >>> people = [
        ...     {"name": "Sam", "age": "Over 35"},
        ...     {"name": "Linda", "age": "25 - 35"},
        ...     {"name": "Phillip", "age": "25 - 35"},
        ... ]
        >>> group_by(people, "age")
        {'Over 35': [{'name': 'Sam'}], '25 - 35': [{'name': 'Linda'}, {'name': 'Phillip'}]}

    Args:
        records: Records, as a list or as a map whose values are records
        key: The discriminator key

    Returns:
        Dict of discriminator value -> list of stripped records
    """
    if isinstance(records, Mapping):
        records = records.values()

    result: Dict[Any, List[Dict[Any, Any]]] = {}
    for record in records:
        remainder = to_ordered_map(record)
        discriminant = get_and_unset(remainder, key)
        result.setdefault(discriminant, []).append(remainder)

    return result


def sub_set(
    array: Union[Mapping, Sequence],
    keys: Iterable[Key],
    strict: bool = False,
) -> Dict[Any, Any]:
    """
    Return a new map holding only the requested keys, in requested order.

    Example:
        >>> fruit = {"d": "lemon", "a": "orange", "b": "banana", "c": "apple"}
        >>> sub_set(fruit, ["d", "c"])
        {'d': 'lemon', 'c': 'apple'}

    Raises:
        OutOfBoundsError: If a requested key is missing and strict is True.
            Nothing is returned in that case.
    """
    _require_collection(array)
    result: Dict[Any, Any] = {}
    for key in keys:
        value = _lookup(array, key)
        if value is _MISSING:
            if strict:
                raise _missing(key, "sub_set")
            continue
        result[key] = value

    return result


def batch(array: Union[Mapping, Sequence], batch_size: int) -> List[Dict[Any, Any]]:
    """
    Split `array` into at most `batch_size` consecutive chunks.

    NOTE: batch_size is the number of groups, not the length of each group.
    Chunk length is ceil(len(array) / batch_size), so fewer groups may come
    back when the division is uneven (5 items in 4 groups gives 3 chunks of
    2, 2 and 1). Original keys are kept within each chunk.

    Example:
        >>> batch(["a", "b", "c", "d", "e"], 2)
        [{0: 'a', 1: 'b', 2: 'c'}, {3: 'd', 4: 'e'}]

    Raises:
        InvalidArgumentError: If batch_size is not a positive integer
    """
    if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size < 1:
        raise InvalidArgumentError("batch_size must be a positive integer")

    entries = list(_items(array))
    if not entries:
        return []

    length = (len(entries) + batch_size - 1) // batch_size
    return [dict(entries[i:i + length]) for i in range(0, len(entries), length)]
