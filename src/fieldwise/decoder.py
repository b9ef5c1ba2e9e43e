"""Decoder primitive and the tree-value decoders built on it.

A Decoder wraps a pure function from a tree value to a DecodeResult.
Errors carry paths relative to the value the decoder was given; ``field``
and ``at`` prefix those paths as failures leave a field, so the path on
the final error always runs from the decoding root.

INVARIANT: ``and_then`` applies its continuation's decoder to the same
input the first decoder saw, never to the value the first decoder
produced, and never runs the continuation after a failure.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from fieldwise.domain.errors import DecodeError
from fieldwise.domain.result import DecodeResult
from fieldwise.domain.types import (
    FieldPath,
    JsonValue,
    PathSegment,
    check_path,
    describe,
    is_array,
    is_object,
)

logger = logging.getLogger(__name__)


class Decoder[T]:
    """A reusable, stateless computation from a tree value to ``T``."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[JsonValue], DecodeResult]) -> None:
        self._fn = fn

    def decode(self, value: JsonValue) -> DecodeResult:
        """Apply this decoder to *value*."""
        return self._fn(value)

    def run(self, value: JsonValue) -> DecodeResult:
        """Apply this decoder as the top-level decode of a payload.

        Same result as :meth:`decode`; failures are also logged at DEBUG
        when the ``log_failures`` setting is on.
        """
        result = self.decode(value)
        if result.error is not None:
            _log_failure(result.error)
        return result

    def and_then[U](self, continuation: Callable[[T], Decoder[U]]) -> Decoder[U]:
        """Sequence: decode, then decode the same input with ``continuation(value)``."""
        return _Bind(self, continuation)

    def map[U](self, fn: Callable[[T], U]) -> Decoder[U]:
        """Transform the decoded value with *fn*."""

        def run(value: JsonValue) -> DecodeResult:
            result = self.decode(value)
            if result.error is not None:
                return result
            return DecodeResult.success(fn(result.value))

        return Decoder(run)


class _Bind[T, U](Decoder[U]):
    """``first.and_then(continuation)``.

    Right-nested chains (the shape every field combinator builds) are
    evaluated in a loop instead of by recursion.
    """

    __slots__ = ("_continuation", "_first")

    def __init__(self, first: Decoder[T], continuation: Callable[[T], Decoder[U]]) -> None:
        super().__init__(self._step)
        self._first = first
        self._continuation = continuation

    def _step(self, value: JsonValue) -> DecodeResult:
        node: Decoder[Any] = self
        while isinstance(node, _Bind):
            result = node._first.decode(value)
            if result.error is not None:
                return result
            node = _next_decoder(node._continuation, result.value)
        return node.decode(value)


def _next_decoder(continuation: Callable[[Any], Any], value: Any) -> Decoder[Any]:
    nxt = continuation(value)
    if not isinstance(nxt, Decoder):
        msg = f"continuation must return a Decoder, got {type(nxt).__name__}"
        raise TypeError(msg)
    return nxt


def _log_failure(error: DecodeError) -> None:
    from fieldwise.config.settings import get_settings
    from fieldwise.output.formatters import format_path

    settings = get_settings()
    if not settings.log_failures:
        return
    path = format_path(error.path, root=settings.path_root)
    logger.debug(
        "Decode failed at %s: %s",
        path,
        error.message,
        extra={"kind": str(error.kind), "path": path},
    )


# --- Constant decoders ---


def succeed[T](value: T) -> Decoder[T]:
    """A decoder that ignores its input and always yields *value*."""
    result = DecodeResult.success(value)
    return Decoder(lambda _: result)


def fail(message: str) -> Decoder[Any]:
    """A decoder that ignores its input and fails with *message* at the current path."""
    result = DecodeResult.failure(DecodeError.validation(message))
    return Decoder(lambda _: result)


# --- Primitive decoders ---


def _wrong_type(expected: str, value: JsonValue) -> DecodeResult:
    message = f"expected {expected}, got {describe(value)}"
    if value is None:
        return DecodeResult.failure(DecodeError.null((), message))
    return DecodeResult.failure(DecodeError.mismatch((), message))


def _decode_string(value: JsonValue) -> DecodeResult:
    if isinstance(value, str):
        return DecodeResult.success(value)
    return _wrong_type("a string", value)


def _decode_integer(value: JsonValue) -> DecodeResult:
    if isinstance(value, bool):
        return _wrong_type("an integer", value)
    if isinstance(value, int):
        return DecodeResult.success(value)
    if isinstance(value, float) and value.is_integer():
        return DecodeResult.success(int(value))
    return _wrong_type("an integer", value)


def _decode_number(value: JsonValue) -> DecodeResult:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return DecodeResult.success(value)
    return _wrong_type("a number", value)


def _decode_boolean(value: JsonValue) -> DecodeResult:
    if isinstance(value, bool):
        return DecodeResult.success(value)
    return _wrong_type("a boolean", value)


string: Decoder[str] = Decoder(_decode_string)
integer: Decoder[int] = Decoder(_decode_integer)
number: Decoder[float] = Decoder(_decode_number)
boolean: Decoder[bool] = Decoder(_decode_boolean)
any_value: Decoder[JsonValue] = Decoder(DecodeResult.success)


def null[T](default: T) -> Decoder[T]:
    """Succeed with *default* when the value is ``null``; fail otherwise."""

    def run(value: JsonValue) -> DecodeResult:
        if value is None:
            return DecodeResult.success(default)
        return _wrong_type("null", value)

    return Decoder(run)


def nullable[T](decoder: Decoder[T]) -> Decoder[T | None]:
    """Decode ``null`` as None and anything else with *decoder*."""

    def run(value: JsonValue) -> DecodeResult:
        if value is None:
            return DecodeResult.success(None)
        return decoder.decode(value)

    return Decoder(run)


def list_of[T](decoder: Decoder[T]) -> Decoder[list[T]]:
    """Decode an array, applying *decoder* to every element."""

    def run(value: JsonValue) -> DecodeResult:
        if not is_array(value):
            return _wrong_type("an array", value)
        items: list[Any] = []
        for i, item in enumerate(value):  # type: ignore[arg-type]
            result = decoder.decode(item)
            if result.error is not None:
                return DecodeResult.failure(result.error.prepend(i))
            items.append(result.value)
        return DecodeResult.success(items)

    return Decoder(run)


def dict_of[T](decoder: Decoder[T]) -> Decoder[dict[str, T]]:
    """Decode an object, applying *decoder* to every value."""

    def run(value: JsonValue) -> DecodeResult:
        if not is_object(value):
            return _wrong_type("an object", value)
        out: dict[str, Any] = {}
        for key, item in value.items():  # type: ignore[union-attr]
            result = decoder.decode(item)
            if result.error is not None:
                return DecodeResult.failure(result.error.prepend(key))
            out[key] = result.value
        return DecodeResult.success(out)

    return Decoder(run)


def one_of[T](*decoders: Decoder[T]) -> Decoder[T]:
    """Try each decoder in order against the same input; the first success wins."""
    if not decoders:
        msg = "one_of needs at least one decoder"
        raise ValueError(msg)

    def run(value: JsonValue) -> DecodeResult:
        errors: list[DecodeError] = []
        for decoder in decoders:
            result = decoder.decode(value)
            if result.error is None:
                return result
            errors.append(result.error)
        if len(errors) == 1:
            return DecodeResult.failure(errors[0])
        reasons = "; ".join(_describe_alternative(e) for e in errors)
        return DecodeResult.failure(
            DecodeError.mismatch((), f"no alternative matched ({reasons})")
        )

    return Decoder(run)


def _describe_alternative(error: DecodeError) -> str:
    if error.at_root:
        return error.message
    from fieldwise.output.formatters import format_path

    return f"{format_path(error.path, root='')}: {error.message}".lstrip(".")


def lazy[T](thunk: Callable[[], Decoder[T]]) -> Decoder[T]:
    """Defer building a decoder until first use, for recursive structures."""
    cache: list[Decoder[T]] = []

    def run(value: JsonValue) -> DecodeResult:
        if not cache:
            cache.append(thunk())
        return cache[0].decode(value)

    return Decoder(run)


# --- Field access ---


def _step_into(container: JsonValue, segment: PathSegment) -> tuple[bool, JsonValue]:
    """Look up one segment. Returns ``(found, child)``.

    The caller has already checked that *container* has the right shape
    for *segment*.
    """
    if isinstance(segment, int):
        seq: Sequence[JsonValue] = container  # type: ignore[assignment]
        if 0 <= segment < len(seq):
            return True, seq[segment]
        return False, None
    mapping: Mapping[str, JsonValue] = container  # type: ignore[assignment]
    if segment in mapping:
        return True, mapping[segment]
    return False, None


def _shape_error(container: JsonValue, segment: PathSegment, path: FieldPath) -> DecodeError | None:
    """Error for looking up *segment* in *container*, or None if the shape fits."""
    if isinstance(segment, int):
        if is_array(container):
            return None
        expected = f"an array with index {segment}"
    else:
        if is_object(container):
            return None
        expected = f"an object with field {segment!r}"
    message = f"expected {expected}, got {describe(container)}"
    if container is None:
        return DecodeError.null(path, message)
    return DecodeError.mismatch(path, message)


def _missing_error(segment: PathSegment, path: FieldPath) -> DecodeError:
    if isinstance(segment, int):
        return DecodeError.missing(path, f"index {segment} is out of range")
    return DecodeError.missing(path, f"missing field {segment!r}")


def locate(value: JsonValue, segments: FieldPath) -> tuple[DecodeError | None, JsonValue]:
    """Walk *segments* through *value*, returning ``(error, child)``.

    Fails at the first segment that is absent or whose container has the
    wrong shape; the error path is the segments walked so far plus the
    failing one.
    """
    current = value
    for i, segment in enumerate(segments):
        walked = segments[: i + 1]
        shape = _shape_error(current, segment, walked)
        if shape is not None:
            return shape, None
        found, child = _step_into(current, segment)
        if not found:
            return _missing_error(segment, walked), None
        current = child
    return None, current


def at[T](path: Iterable[PathSegment], decoder: Decoder[T]) -> Decoder[T]:
    """Decode the value at *path* (string keys and integer indices) with *decoder*."""
    segments = check_path(path)

    def run(value: JsonValue) -> DecodeResult:
        error, child = locate(value, segments)
        if error is not None:
            return DecodeResult.failure(error)
        result = decoder.decode(child)
        if result.error is not None:
            return DecodeResult.failure(result.error.prepend(*segments))
        return result

    return Decoder(run)


def field[T](name: str, decoder: Decoder[T]) -> Decoder[T]:
    """Decode the field *name* of an object with *decoder*."""
    if not isinstance(name, str):
        msg = f"field names must be str, got {type(name).__name__}"
        raise TypeError(msg)
    return at((name,), decoder)


def index[T](i: int, decoder: Decoder[T]) -> Decoder[T]:
    """Decode element *i* of an array with *decoder*."""
    if isinstance(i, bool) or not isinstance(i, int):
        msg = f"array indices must be int, got {type(i).__name__}"
        raise TypeError(msg)
    return at((i,), decoder)
