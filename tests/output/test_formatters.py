"""Tests for error-path and result formatting."""

import json

import pytest

from fieldwise.domain.errors import DecodeError
from fieldwise.domain.result import DecodeResult
from fieldwise.output.formatters import format_error, format_path, format_result


class TestFormatPath:
    @pytest.mark.parametrize(
        "path,expected",
        [
            ((), "$"),
            (("author", "name"), "$.author.name"),
            (("items", 3), "$.items[3]"),
            ((0, "id"), "$[0].id"),
            (("first name",), '$["first name"]'),
            (("a.b",), '$["a.b"]'),
            (("",), '$[""]'),
        ],
    )
    def test_paths(self, path: tuple[str | int, ...], expected: str) -> None:
        assert format_path(path, root="$") == expected

    def test_custom_root(self) -> None:
        assert format_path(("a",), root="body") == "body.a"

    def test_root_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from fieldwise.config.settings import reset_settings

        monkeypatch.setenv("FIELDWISE_PATH_ROOT", "payload")
        reset_settings()
        assert format_path(("a", 1)) == "payload.a[1]"


class TestFormatError:
    def test_human(self) -> None:
        error = DecodeError.missing(("author", "name"), "missing field 'name'")
        assert format_error(error, root="$") == "missing_field at $.author.name: missing field 'name'"

    def test_human_root(self) -> None:
        error = DecodeError.validation("You must be an adult")
        assert format_error(error) == "validation_failure at $: You must be an adult"

    def test_json(self) -> None:
        error = DecodeError.null(("weight",), "expected an integer, got null")
        parsed = json.loads(format_error(error, json_output=True))
        assert parsed["kind"] == "null_field"
        assert parsed["path"] == ["weight"]


class TestFormatResult:
    def test_ok_human(self) -> None:
        assert format_result(DecodeResult.success("John Doe")) == "OK: 'John Doe'"

    def test_error_human(self) -> None:
        result = DecodeResult.failure(DecodeError.missing(("age",), "missing field 'age'"))
        assert format_result(result) == "ERROR: missing_field at $.age: missing field 'age'"

    def test_ok_json(self) -> None:
        parsed = json.loads(format_result(DecodeResult.success([1, 2]), json_output=True))
        assert parsed == {"ok": True, "value": [1, 2]}

    def test_ok_json_falls_back_to_repr(self) -> None:
        parsed = json.loads(format_result(DecodeResult.success({1, 2}), json_output=True))
        assert parsed["value"] == "{1, 2}"

    def test_error_json(self) -> None:
        result = DecodeResult.failure(DecodeError.mismatch(("tags", 0), "expected a string"))
        parsed = json.loads(format_result(result, json_output=True))
        assert parsed["ok"] is False
        assert parsed["error"]["path"] == ["tags", 0]
        assert parsed["error"]["kind"] == "type_mismatch"
