"""Coloured log lines and log-level setup."""

from __future__ import annotations

import logging
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

OFF = logging.CRITICAL + 10

_LEVEL_NAMES = {
    TRACE: "TRACE",
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "ERROR",
}

_FILTER_LEVELS = {
    "off": OFF,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}


class RioFormatter(logging.Formatter):
    """Formats records as ``[LEVEL] target message`` with ANSI colours."""

    def format(self, record: logging.LogRecord) -> str:
        level = _LEVEL_NAMES.get(record.levelno, record.levelname)
        return (
            f"\x1b[35m[{level}]\x1b[0m \x1b[34m{record.name}\x1b[0m "
            f"{record.getMessage()}\0"
        )


class _RioHandler(logging.StreamHandler):
    pass


def setup_logging(level_name: str) -> int:
    """Install the coloured stdout handler on the root logger.

    ``level_name`` is one of off, error, warn, info, debug or trace, in any
    case; anything else turns logging off. Returns the level applied.
    """
    level = _FILTER_LEVELS.get(level_name.strip().lower(), OFF)
    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, _RioHandler)]:
        root.removeHandler(handler)
    handler = _RioHandler(sys.stdout)
    handler.setFormatter(RioFormatter())
    root.addHandler(handler)
    root.setLevel(level)
    return level