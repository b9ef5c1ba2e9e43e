"""DecodeError: structured, immutable decoding failure.

INVARIANT: DecodeError is a value, never raised. Failures travel as the
error branch of a DecodeResult. ``path`` runs from the decoding root to
the point of failure.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from fieldwise.domain.types import ErrorKind, FieldPath, PathSegment


class DecodeError(BaseModel):
    """Why and where a decoder rejected its input.

    Attributes:
        kind: Failure category (missing, null, type mismatch, validation).
        path: Keys and indices from the decoding root to the failure.
        message: Human-readable description.
    """

    model_config = {"frozen": True}

    kind: ErrorKind
    path: FieldPath = Field(default_factory=tuple)
    message: str

    @classmethod
    def missing(cls, path: FieldPath, message: str) -> DecodeError:
        return cls(kind=ErrorKind.MISSING_FIELD, path=path, message=message)

    @classmethod
    def null(cls, path: FieldPath, message: str) -> DecodeError:
        return cls(kind=ErrorKind.NULL_FIELD, path=path, message=message)

    @classmethod
    def mismatch(cls, path: FieldPath, message: str) -> DecodeError:
        return cls(kind=ErrorKind.TYPE_MISMATCH, path=path, message=message)

    @classmethod
    def validation(cls, message: str) -> DecodeError:
        return cls(kind=ErrorKind.VALIDATION_FAILURE, message=message)

    @property
    def at_root(self) -> bool:
        return not self.path

    def prepend(self, *segments: PathSegment) -> DecodeError:
        """Return a copy with *segments* in front of the current path."""
        if not segments:
            return self
        return self.model_copy(update={"path": (*segments, *self.path)})


class DecodeFailure(Exception):
    """Raised by ``DecodeResult.unwrap()`` when the result is a failure."""

    def __init__(self, error: DecodeError) -> None:
        super().__init__(error.message)
        self.error = error
