"""Structured logging on stderr; stdout is reserved for the rendered report."""

from __future__ import annotations

import logging
import sys

import structlog

# Request-level chatter from the comment poster's HTTP client.
_NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structlog over stdlib logging.

    ``json_logs`` switches the console renderer for one JSON object per line,
    which CI log viewers can fold and search.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s", stream=sys.stderr, level=numeric_level, force=True
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
