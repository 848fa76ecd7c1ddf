"""Console logging using structlog."""

from __future__ import annotations

import logging
import sys

import structlog

_console = structlog.dev.ConsoleRenderer(colors=False)


def render(logger, method_name, event_dict):
    """Print messages without context as plain text, like ``echo >&2``."""
    if set(event_dict) <= {"event", "level"}:
        return event_dict["event"]
    return _console(logger, method_name, event_dict)


def setup_logging(level: str = "INFO") -> None:
    """Send log records to stderr."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            render,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
