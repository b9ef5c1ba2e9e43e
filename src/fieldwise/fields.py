"""Field combinators: decode one field, bind it, continue.

Each combinator decodes a field of the current object, hands the decoded
value to a continuation, and runs the decoder the continuation returns
against the same object. Chains end with ``succeed`` (build the target
value) or ``fail`` (reject after cross-field checks)::

    user = required("name", string, lambda name:
           optional("email", string, lambda email:
           required("age", integer, lambda age:
               fail("You must be an adult") if age < 18
               else succeed(User(name, email, age)))))

Previously bound names live only in the continuation closures.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from fieldwise.decoder import Decoder, at, field, locate
from fieldwise.domain.result import DecodeResult
from fieldwise.domain.types import ErrorKind, JsonValue, PathSegment, check_path


def required[T, U](
    name: str,
    decoder: Decoder[T],
    continuation: Callable[[T], Decoder[U]],
) -> Decoder[U]:
    """Decode the required field *name*, then continue with its value.

    Fails with ``missing_field`` when the field is absent and
    ``null_field`` when it is ``null`` (unless *decoder* accepts null).
    """
    return field(name, decoder).and_then(continuation)


def optional[T, U](
    name: str,
    decoder: Decoder[T],
    continuation: Callable[[T | None], Decoder[U]],
) -> Decoder[U]:
    """Decode the optional field *name*, then continue with its value or None.

    Absent and ``null`` both pass None without consulting *decoder*. A
    present value that *decoder* rejects is still a failure.
    """
    if not isinstance(name, str):
        msg = f"field names must be str, got {type(name).__name__}"
        raise TypeError(msg)
    return optional_at((name,), decoder, continuation)


def required_at[T, U](
    path: Iterable[PathSegment],
    decoder: Decoder[T],
    continuation: Callable[[T], Decoder[U]],
) -> Decoder[U]:
    """Decode the required value at *path*, then continue with it.

    Traversal stops at the first absent or wrong-shaped segment, and the
    error path ends at that segment.
    """
    return at(path, decoder).and_then(continuation)


def optional_at[T, U](
    path: Iterable[PathSegment],
    decoder: Decoder[T],
    continuation: Callable[[T | None], Decoder[U]],
) -> Decoder[U]:
    """Decode the optional value at *path*, then continue with it or None.

    Only the final segment may be absent or ``null``. Missing or
    wrong-shaped intermediate containers are failures.
    """
    segments = check_path(path)
    if not segments:
        msg = "optional_at needs a non-empty path"
        raise ValueError(msg)

    def run(value: JsonValue) -> DecodeResult:
        error, child = locate(value, segments)
        if error is not None:
            if error.kind is ErrorKind.MISSING_FIELD and len(error.path) == len(segments):
                return DecodeResult.success(None)
            return DecodeResult.failure(error)
        if child is None:
            return DecodeResult.success(None)
        result = decoder.decode(child)
        if result.error is not None:
            return DecodeResult.failure(result.error.prepend(*segments))
        return result

    return Decoder(run).and_then(continuation)
