"""Tests for DecodeError and DecodeFailure."""

import json

import pytest

from fieldwise.domain.errors import DecodeError, DecodeFailure
from fieldwise.domain.types import ErrorKind


class TestDecodeError:
    def test_factories_set_kind(self) -> None:
        assert DecodeError.missing(("a",), "m").kind is ErrorKind.MISSING_FIELD
        assert DecodeError.null(("a",), "m").kind is ErrorKind.NULL_FIELD
        assert DecodeError.mismatch(("a",), "m").kind is ErrorKind.TYPE_MISMATCH
        assert DecodeError.validation("m").kind is ErrorKind.VALIDATION_FAILURE

    def test_validation_is_at_root(self) -> None:
        error = DecodeError.validation("You must be an adult")
        assert error.path == ()
        assert error.at_root is True

    def test_list_path_is_coerced_to_tuple(self) -> None:
        error = DecodeError.missing(["items", 2], "gone")  # type: ignore[arg-type]
        assert error.path == ("items", 2)

    def test_prepend(self) -> None:
        error = DecodeError.missing(("name",), "missing field 'name'")
        moved = error.prepend("data", 0)
        assert moved.path == ("data", 0, "name")
        assert moved.kind is ErrorKind.MISSING_FIELD
        assert moved.message == error.message
        assert error.path == ("name",)

    def test_prepend_nothing_returns_same(self) -> None:
        error = DecodeError.validation("bad")
        assert error.prepend() is error

    def test_frozen(self) -> None:
        error = DecodeError.validation("bad")
        with pytest.raises(Exception):
            error.message = "other"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert DecodeError.missing(("a",), "m") == DecodeError.missing(("a",), "m")
        assert DecodeError.missing(("a",), "m") != DecodeError.null(("a",), "m")

    def test_json_serialization(self) -> None:
        error = DecodeError.mismatch(("items", 3), "expected a string, got an integer")
        parsed = json.loads(error.model_dump_json())
        assert parsed == {
            "kind": "type_mismatch",
            "path": ["items", 3],
            "message": "expected a string, got an integer",
        }


class TestDecodeFailure:
    def test_carries_error(self) -> None:
        error = DecodeError.validation("bad")
        exc = DecodeFailure(error)
        assert exc.error is error
        assert str(exc) == "bad"
