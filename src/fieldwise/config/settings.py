"""Library settings: init kwargs and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs, passed to ``FieldwiseSettings(...)``
  2. Env vars with the ``FIELDWISE_`` prefix
  3. Code defaults baked into the model

Uses Pydantic Settings v2. The library never reads settings at import
time; :func:`get_settings` builds them lazily on first use.
"""

from __future__ import annotations

import threading

from pydantic_settings import BaseSettings

_lock = threading.Lock()
_settings: FieldwiseSettings | None = None


class FieldwiseSettings(BaseSettings):
    """Process-wide settings for decoding, error formatting, and logging.

    Attributes:
        log_failures: Log failed top-level decodes at DEBUG level.
        path_root: Label for the decoding root in formatted paths.
        verbose: Enable DEBUG output in :func:`configure_logging`.
        log_json: Use the JSON renderer in :func:`configure_logging`.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FIELDWISE_",
    }

    log_failures: bool = True
    path_root: str = "$"
    verbose: bool = False
    log_json: bool = False


def get_settings() -> FieldwiseSettings:
    """Return the cached settings, building them from the environment once."""
    global _settings
    with _lock:
        if _settings is None:
            _settings = FieldwiseSettings()
        return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    with _lock:
        _settings = None
