"""Logging utilities built on top of :mod:`loguru`."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logging(log_file: Optional[Path] = None, level: str = "INFO") -> None:
    """Enable and configure the ``nestwatch`` loggers.

    The package keeps its loggers disabled on import. Records go to stderr so
    that reports printed to stdout stay clean.

    Args:
        log_file: Optional file path for an extra, rotated log sink.
        level: Minimum log level (string understood by loguru).
    """

    logger.remove()
    logger.add(sys.stderr, level=level)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level=level, rotation="10 MB", retention="7 days")
    logger.enable("nestwatch")


__all__ = ["setup_logging", "logger"]
