"""Structured logging setup for meshops."""

from __future__ import annotations

import logging
import sys

# Third-party loggers that are chatty at DEBUG/INFO (trimesh logs every export)
_QUIET_LOGGERS = ("trimesh",)


def setup_logging(level: str = "WARNING") -> None:
    """Configure structured logging with consistent format.

    `level` applies to the meshops loggers. Third-party libraries stay at
    WARNING or above whatever level is requested.
    """
    numeric_level = getattr(logging, level.upper())
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )
    logging.getLogger("meshops").setLevel(numeric_level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
