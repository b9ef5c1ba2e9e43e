"""Shared pytest fixtures and test helpers for fieldwise tests."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

import pytest

from fieldwise.config.settings import reset_settings
from fieldwise.domain.result import DecodeResult
from fieldwise.domain.types import ErrorKind


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Isolate every test from FIELDWISE_* env vars and cached settings."""
    for name in ("LOG_FAILURES", "PATH_ROOT", "VERBOSE", "LOG_JSON"):
        monkeypatch.delenv(f"FIELDWISE_{name}", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def article() -> dict[str, Any]:
    """A nested payload with an author object and a tag array."""
    return {
        "id": 321,
        "title": "Decoding in continuation-passing style",
        "author": {"name": "John Doe", "email": None},
        "tags": ["json", "decoders"],
    }


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def assert_ok(result: DecodeResult, expected: Any) -> None:
    """Assert a successful decode with the expected value."""
    assert result.ok, result.error
    assert result.value == expected


def assert_err(result: DecodeResult, kind: ErrorKind, path: tuple[Any, ...]) -> None:
    """Assert a failed decode with the expected kind and path."""
    assert not result.ok, result.value
    assert result.error is not None
    assert result.error.kind is kind
    assert result.error.path == path
