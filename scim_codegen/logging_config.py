"""Logging setup shared by the CLI and library modules.

Modules call ``get_logger(__name__)``; the CLI calls ``setup_logging`` once
at startup. Without that call the package stays silent (a ``NullHandler`` is
attached to the package logger).
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "scim_codegen"

_FMT_MINIMAL = "%(levelname)s: %(message)s"
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d - %(message)s"
_DATEFMT = "%H:%M:%S"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    return numeric


def setup_logging(level: str | int = "WARNING", log_file: str | None = None) -> None:
    """Configure the package logger.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ...) or numeric level.
        log_file: Optional file that receives the same records at full detail.
    """
    numeric_level = _parse_level(level)
    fmt = _FMT_DEBUG if numeric_level <= logging.DEBUG else _FMT_MINIMAL

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(numeric_level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=_DATEFMT))
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(_FMT_DEBUG, datefmt=_DATEFMT))
        logger.addHandler(file_handler)

    logger.debug("Logging configured at %s", logging.getLevelName(numeric_level))


def get_logger(name: str) -> logging.Logger:
    """Return a logger for a module inside the package."""
    return logging.getLogger(name)
