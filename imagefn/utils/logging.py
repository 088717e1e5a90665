"""Logging configuration for the function."""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from pythonjsonlogger.json import JsonFormatter

from imagefn.config import Settings, get_settings

_HANDLER_NAME = "imagefn"


def setup_logging(settings: Optional[Settings] = None, stream: Optional[TextIO] = None) -> None:
    """
    Configure function logging.

    Logs go to stderr by default: stdout carries the function's JSON output
    and must never receive log lines. Calling this more than once leaves a
    single handler installed.
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    if settings.log_format == "json":
        formatter = JsonFormatter(
            "%(timestamp)s %(levelname)s %(name)s %(message)s",
            timestamp=True,
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(existing)
    root_logger.setLevel(log_level)
    root_logger.addHandler(handler)

    # Set log levels for third-party libraries
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger("oracledb").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


def flush_logger(logger: logging.Logger) -> None:
    """Flush every handler that records from ``logger`` can reach."""
    current: Optional[logging.Logger] = logger
    while current is not None:
        for handler in current.handlers:
            try:
                handler.flush()
            except (OSError, ValueError):
                # Stream already closed; nothing left to flush
                continue
        if not current.propagate:
            break
        current = current.parent


@contextmanager
def invocation_logger(name: str) -> Iterator[logging.Logger]:
    """
    Provide the logger for one invocation.

    Handlers are flushed when the block exits, whether it succeeded or not,
    so diagnostics are not lost when the runtime freezes the process.
    """
    logger = get_logger(name)
    try:
        yield logger
    finally:
        flush_logger(logger)
