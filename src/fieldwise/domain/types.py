"""Tree value aliases, path segments, and the error taxonomy.

A tree value is what a JSON parser hands back: ``None``, ``bool``,
``int``, ``float``, ``str``, a list of tree values, or a mapping from
string keys to tree values. Decoders only read tree values, never mutate
them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Any

type JsonValue = None | bool | int | float | str | list[JsonValue] | dict[str, JsonValue]

PathSegment = str | int
FieldPath = tuple[PathSegment, ...]


class ErrorKind(StrEnum):
    """Why a decoder rejected its input."""

    MISSING_FIELD = "missing_field"
    NULL_FIELD = "null_field"
    TYPE_MISMATCH = "type_mismatch"
    VALIDATION_FAILURE = "validation_failure"


def is_object(value: Any) -> bool:
    """True for mapping tree values."""
    return isinstance(value, Mapping)


def is_array(value: Any) -> bool:
    """True for array tree values (lists and tuples, never strings)."""
    return isinstance(value, (list, tuple))


def describe(value: Any) -> str:
    """Name the JSON type of *value* for error messages.

    Examples:
        >>> describe(None)
        'null'
        >>> describe(True)
        'a boolean'
        >>> describe([1, 2])
        'an array'
    """
    if value is None:
        return "null"
    # bool before int: True is an int too
    if isinstance(value, bool):
        return "a boolean"
    if isinstance(value, int):
        return "an integer"
    if isinstance(value, float):
        return "a number"
    if isinstance(value, str):
        return "a string"
    if is_array(value):
        return "an array"
    if is_object(value):
        return "an object"
    return f"an unsupported value of type {type(value).__name__}"


def check_segment(segment: Any) -> PathSegment:
    """Reject path segments that are neither keys nor indices."""
    if isinstance(segment, bool) or not isinstance(segment, (str, int)):
        msg = f"path segments must be str or int, got {type(segment).__name__}"
        raise TypeError(msg)
    return segment


def check_path(path: Iterable[Any]) -> FieldPath:
    """Validate every segment of *path*; a bare string is not a path."""
    if isinstance(path, str):
        msg = f"path must be a sequence of segments, not a string ({path!r})"
        raise TypeError(msg)
    return tuple(check_segment(s) for s in path)
