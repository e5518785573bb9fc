"""Logging utilities for scenarioreport runs."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_LOGGER_NAME = "scenarioreport"
_CONSOLE_FORMAT = "[scenarioreport] %(levelname)s %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the scenarioreport hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(*, verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Send scenarioreport records to ``stream`` (stderr by default).

    Report files are written to the target directory, so log output never
    goes to stdout.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
