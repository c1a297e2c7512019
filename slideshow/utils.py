"""Utility helpers: logging setup."""

from __future__ import annotations

import logging


def setup_logging() -> logging.Logger:
    """Configure the root logger and return the ``slideshow`` logger.

    Safe to call multiple times — ``logging.basicConfig`` is a no-op if
    the root logger already has handlers.
    """
    logging.basicConfig(
        format="%(asctime)s %(levelname)-8s %(message)s",
        datefmt="%H:%M:%S",
        level=logging.INFO,
    )
    return logging.getLogger("slideshow")


def ensure_logging() -> None:
    """Ensure the ``slideshow`` logger has at least one handler.

    Call this from entry points that may run *without* ``setup_logging``.
    If the logger or the root logger already has a handler, this is a no-op.
    """
    logger = logging.getLogger("slideshow")
    if not logger.handlers and not logging.getLogger().handlers:
        setup_logging()
