"""Logging setup shared by the repodoc CLI and service."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT_LOGGER = "repodoc"
CONSOLE_FORMAT = "[repodoc] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    """Return the logger for a repodoc component, e.g. ``get_logger("tree")``."""
    if not component:
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(f"{ROOT_LOGGER}.{component}")


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route repodoc log records to stderr and, when given, to ``log_file``.

    Console output never goes to stdout, where ``repodoc generate`` writes the
    README. The file sink always records debug detail so a run can be inspected
    after the fact without re-running it with ``--verbose``.
    """
    console_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER)
    logger.propagate = False

    # Drop handlers from an earlier call in the same process.
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    logger.addHandler(
        _handler(logging.StreamHandler(sys.stderr), console_level, CONSOLE_FORMAT)
    )
    if log_file is None:
        logger.setLevel(console_level)
    else:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(
            _handler(
                logging.FileHandler(log_file, encoding="utf-8"), logging.DEBUG, FILE_FORMAT
            )
        )
        logger.setLevel(logging.DEBUG)
    return logger


__all__ = ["configure_logging", "get_logger"]
