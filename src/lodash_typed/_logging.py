"""Structured logging for lodash_typed.

Library loggers are structlog BoundLoggers wrapping stdlib loggers under the
``lodash_typed`` namespace. Nothing is emitted until the application calls
``configure_logging`` (or ``init(log_level=...)``), since the stdlib default
level filters out the debug events the library produces.

Uses structlog's ProcessorFormatter so that structlog events and plain stdlib
records render through the same pipeline.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = [
    'LOGGER_NAME',
    'configure_logging',
    'get_logger',
]

LOGGER_NAME = 'lodash_typed'

_handler: logging.Handler | None = None


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def _get_structlog_processors() -> list[Any]:
    """Get the full processor chain for library loggers."""
    return [
        structlog.stdlib.filter_by_level,
        *_get_shared_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    """Get the appropriate renderer based on output format."""
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Attach a structured handler to the ``lodash_typed`` logger.

    Only the library's own logger is touched; the root logger and any
    application handlers are left alone. Calling this again replaces the
    handler installed by the previous call.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use console output.
    """
    global _handler  # noqa: PLW0603

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    library_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        library_logger.removeHandler(_handler)
    library_logger.addHandler(handler)
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = handler


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger bound to a stdlib logger.

    Args:
        name: Logger name, normally the calling module's ``__name__``.
            Defaults to the library root logger.

    Returns:
        A structlog BoundLogger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or LOGGER_NAME),
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
