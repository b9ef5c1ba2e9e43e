"""DecodeResult: the outcome of applying a decoder to a tree value.

INVARIANT: ``ok`` is True exactly when ``error`` is None.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, model_validator

from fieldwise.domain.errors import DecodeError, DecodeFailure


class DecodeResult(BaseModel):
    """Success-or-failure returned by every decoder.

    Attributes:
        ok: Whether decoding succeeded.
        value: Decoded value on success, None on failure.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    value: Any = None
    error: DecodeError | None = None

    @model_validator(mode="after")
    def _check_consistent(self) -> DecodeResult:
        if self.ok == (self.error is not None):
            msg = "ok must be True exactly when error is None"
            raise ValueError(msg)
        return self

    @classmethod
    def success(cls, value: Any) -> DecodeResult:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: DecodeError) -> DecodeResult:
        return cls(ok=False, error=error)

    def unwrap(self) -> Any:
        """Return the decoded value, raising DecodeFailure on failure."""
        if self.error is not None:
            raise DecodeFailure(self.error)
        return self.value

    def unwrap_or(self, default: Any) -> Any:
        """Return the decoded value, or *default* on failure."""
        if self.error is not None:
            return default
        return self.value
