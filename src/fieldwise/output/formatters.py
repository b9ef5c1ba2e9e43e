"""Error-path and result formatting.

Paths render in a JSONPath-like form rooted at a configurable label:
``$``, ``$.author.name``, ``$.items[3]``, ``$["first name"]``.
"""

from __future__ import annotations

import json as _json
from collections.abc import Iterable
from typing import TYPE_CHECKING

from fieldwise.domain.types import PathSegment

if TYPE_CHECKING:
    from fieldwise.domain.errors import DecodeError
    from fieldwise.domain.result import DecodeResult


def _root_label(root: str | None) -> str:
    if root is not None:
        return root
    from fieldwise.config.settings import get_settings

    return get_settings().path_root


def _format_segment(segment: PathSegment) -> str:
    if isinstance(segment, int):
        return f"[{segment}]"
    if segment.isidentifier():
        return f".{segment}"
    return f"[{_json.dumps(segment)}]"


def format_path(path: Iterable[PathSegment], *, root: str | None = None) -> str:
    """Render a field path for humans.

    Examples:
        >>> format_path(("author", "name"), root="$")
        '$.author.name'
        >>> format_path(("items", 3), root="$")
        '$.items[3]'
        >>> format_path(("first name",), root="$")
        '$["first name"]'
    """
    return _root_label(root) + "".join(_format_segment(s) for s in path)


def format_error(
    error: DecodeError,
    *,
    json_output: bool = False,
    root: str | None = None,
) -> str:
    """Format a DecodeError for display.

    Args:
        error: The error to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        root: Root label for the path. Defaults to the ``path_root`` setting.
    """
    if json_output:
        return error.model_dump_json(indent=2)
    return f"{error.kind} at {format_path(error.path, root=root)}: {error.message}"


def format_result(
    result: DecodeResult,
    *,
    json_output: bool = False,
    root: str | None = None,
) -> str:
    """Format a DecodeResult for display."""
    if result.error is None:
        if json_output:
            return _json.dumps({"ok": True, "value": result.value}, indent=2, default=repr)
        return f"OK: {result.value!r}"
    if json_output:
        payload = {"ok": False, "error": result.error.model_dump(mode="json")}
        return _json.dumps(payload, indent=2)
    return f"ERROR: {format_error(result.error, root=root)}"
