"""Logging setup for the ``tablecast`` logger tree."""

from __future__ import annotations

import logging

from tablecast.core.config import DecodeSettings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(settings: DecodeSettings | None = None) -> logging.Logger:
    """Attach a console handler to the package logger at the configured level.

    Safe to call more than once; the handler is only installed the first time.
    """
    if settings is None:
        settings = DecodeSettings()

    logger = logging.getLogger("tablecast")
    logger.setLevel(settings.log_level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
