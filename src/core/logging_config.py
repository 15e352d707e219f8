"""Structured logging configuration.

Every module logs through a structlog logger that renders one JSON
object per event. The minimum level is shared by all loggers and can be
changed at runtime by the CLI.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

_DEFAULT_LEVEL = logging.INFO


def configure_logging(level: int = _DEFAULT_LEVEL) -> None:
    """Configure structlog processors and the minimum level.

    Args:
        level: Stdlib logging level, e.g. ``logging.DEBUG``.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    """Create a logger bound to the current stderr stream."""
    return structlog.PrintLogger(sys.stderr)


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A lazily bound structlog logger.
    """
    return structlog.get_logger(name)


configure_logging()
