"""Logging setup for the table cache."""

from __future__ import annotations

import logging
import sys


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
ROOT_LOGGER = "table_cache"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling it again only updates the level.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    if not any(getattr(h, "_table_cache", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        handler._table_cache = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger


__all__ = ["setup_logging", "LOG_FORMAT", "LOG_DATE_FORMAT"]
