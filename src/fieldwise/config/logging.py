"""structlog configuration for fieldwise.

Two output modes:
- Human (default): colored console output to stderr
- JSON (log_json=True): Structured JSON lines to stderr

Library modules log through stdlib ``logging.getLogger(__name__)``;
nothing is configured on import. Applications call
:func:`configure_logging` once if they want fieldwise records rendered.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output for ``fieldwise``. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    fieldwise_level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("fieldwise").setLevel(fieldwise_level)


def configure_from_settings() -> None:
    """Configure logging from the ``FIELDWISE_VERBOSE``/``FIELDWISE_LOG_JSON`` settings."""
    from fieldwise.config.settings import get_settings

    settings = get_settings()
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
