"""Opt-in logging setup for applications embedding rasterkit.

The library itself only ever calls ``logging.getLogger(__name__)``; nothing is
printed unless the host application configures handlers, for example:

    >>> from rasterkit.logging_config import setup_logging
    >>> setup_logging("DEBUG")

Format:
    2026-10-19T13:45:12.345+00:00 | DEBUG | rasterkit.gradients.radial | message
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO, Union

PACKAGE_LOGGER = "rasterkit"

# Marks the handler we own so repeated setup calls do not stack handlers
_HANDLER_ATTR = "_rasterkit_handler"


class UTCFormatter(logging.Formatter):
    """ISO-8601 UTC timestamps with millisecond precision."""

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return ts.isoformat(timespec="milliseconds")


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package namespace."""
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def setup_logging(
    level: Union[int, str] = logging.INFO,
    stream: Optional[TextIO] = None,
    fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
) -> logging.Logger:
    """
    Attach a single stream handler to the ``rasterkit`` logger.

    Idempotent: calling it again replaces the previous handler instead of
    adding another one.

    Args:
        level: Logging level name or number.
        stream: Target stream, defaults to ``sys.stderr``.
        fmt: Record format string.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown logging level: {level!r}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(UTCFormatter(fmt))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
