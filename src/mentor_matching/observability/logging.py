"""Shared logging utilities for consistent matching observability.

Usage example:
    from mentor_matching.observability.logging import get_logger

    logger = get_logger("mentor_matching.match")
    logger.info("Scoring %s mentors", mentor_count)
"""

from __future__ import annotations

import logging
import time

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
_ROOT_NAME = "mentor_matching"
_LEVEL_NAMES = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class UnknownLogLevelError(ValueError):
    """Raised when a log level name is not recognised."""

    def __init__(self, name: str) -> None:
        supported = ", ".join(sorted(_LEVEL_NAMES))
        super().__init__(f"Unknown log level {name!r}. Expected one of: {supported}.")


def parse_log_level(name: str) -> int:
    """Translate a case-insensitive level name into a logging level."""
    key = name.strip().lower()
    if key not in _LEVEL_NAMES:
        raise UnknownLogLevelError(name)
    return _LEVEL_NAMES[key]


def get_logger(name: str) -> logging.Logger:
    """Return a standard logger configured for UTC timestamps.

    Loggers under the ``mentor_matching`` namespace inherit the level set with
    ``set_log_level``; the handler is attached once per name.

    Args:
        name: Logger name (use a stable module-qualified name).

    Returns:
        A logger with a single stream handler and a consistent UTC format.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
        formatter.converter = time.gmtime
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        root_level = logging.getLogger(_ROOT_NAME).level
        logger.setLevel(root_level or logging.INFO)
        logger.propagate = False
    return logger


def set_log_level(level: int) -> None:
    """Apply a level to every ``mentor_matching`` logger created so far and later."""
    logging.getLogger(_ROOT_NAME).setLevel(level)
    for name, candidate in logging.root.manager.loggerDict.items():
        if name.startswith(f"{_ROOT_NAME}.") and isinstance(candidate, logging.Logger):
            candidate.setLevel(level)
