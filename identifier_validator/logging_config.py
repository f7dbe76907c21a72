"""Structured logging setup.

The library routes events through stdlib logging and stays silent by default.
The CLI reconfigures structlog to write to stderr so logs never interleave
with shell output on stdout.
"""

import logging
import sys
from typing import Optional, TextIO

import structlog


def resolve_level(level: str) -> int:
    """Map a level name ("debug", "WARNING") to its numeric value; unknown names fall back to WARNING."""
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.WARNING


def configure_logging(
    level: str = "warning",
    json_output: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure structlog once for the process.

    Args:
        level: Minimum level name to emit
        json_output: Render JSON lines instead of the colourless console format
        stream: Destination, defaults to stderr
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_level(level)),
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )


def configure_library_logging() -> None:
    """Route log events through stdlib ``logging``, one logger per module name.

    Stdlib logging emits nothing below WARNING until the application adds a
    handler, so importing and calling the validators prints nothing.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
