"""Shared logger for the engine, the tool API and the CLI."""

from __future__ import annotations

import logging

LOGGER_NAME = "sudoku_engine"


def get_logger(level: str | int | None = None) -> logging.Logger:
    """
    Return the engine-wide logger.

    A console handler at INFO is installed only when nothing is configured yet,
    so applications that set up logging themselves keep control.
    """
    logger = logging.getLogger(LOGGER_NAME)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)

    return logger
