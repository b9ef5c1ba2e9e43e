"""fieldwise: continuation-passing decoders for JSON-like tree values.

Decode one field at a time, bind each value in a continuation, and build
the result once every field is bound::

    from fieldwise import integer, required, string, succeed

    person = required("name", string, lambda name:
             required("age", integer, lambda age:
                 succeed((name, age))))

    person.run({"name": "John Doe", "age": 42}).unwrap()
"""

from fieldwise.decoder import (
    Decoder,
    any_value,
    at,
    boolean,
    dict_of,
    fail,
    field,
    index,
    integer,
    lazy,
    list_of,
    null,
    nullable,
    number,
    one_of,
    string,
    succeed,
)
from fieldwise.domain.errors import DecodeError, DecodeFailure
from fieldwise.domain.result import DecodeResult
from fieldwise.domain.types import ErrorKind, FieldPath, JsonValue, PathSegment
from fieldwise.fields import optional, optional_at, required, required_at

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "DecodeFailure",
    "DecodeResult",
    "Decoder",
    "ErrorKind",
    "FieldPath",
    "JsonValue",
    "PathSegment",
    "any_value",
    "at",
    "boolean",
    "dict_of",
    "fail",
    "field",
    "index",
    "integer",
    "lazy",
    "list_of",
    "null",
    "nullable",
    "number",
    "one_of",
    "optional",
    "optional_at",
    "required",
    "required_at",
    "string",
    "succeed",
]
