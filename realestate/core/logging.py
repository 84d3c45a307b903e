"""Structured logging configuration."""

import logging
import sys

import structlog

_configured = False


def setup_logging(level: str = "INFO", log_format: str = "console") -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        level: Log level name; unknown names fall back to INFO
        log_format: "console" for human readable lines, "json" for one JSON
            object per line

    """
    global _configured

    log_level = getattr(logging, level.upper(), logging.INFO)

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    if not _configured:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(handler)

    # Reduce noise from the driver
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger with the given name (usually ``__name__``)."""
    return structlog.get_logger(name)
