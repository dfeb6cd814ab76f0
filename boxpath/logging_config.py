"""
Logging for the boxpath service.

Only the ``boxpath`` logger tree is touched: uvicorn owns the root and its
own ``uvicorn.*`` loggers, so our records go through a separate stderr
handler laid out like uvicorn's default lines ("INFO:     ...").
"""

from __future__ import annotations

import logging

from .settings import Settings

LOGGER_NAME = "boxpath"
LOG_FORMAT = "%(levelprefix)s %(name)s: %(message)s"


class _LevelPrefixFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        record.levelprefix = f"{record.levelname}:".ljust(9)
        return super().format(record)


def configure_logging(settings: Settings) -> logging.Logger:
    """Apply ``settings.log_level`` to the package logger; safe to call twice."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level)

    if not any(getattr(h, "_boxpath", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(_LevelPrefixFormatter(LOG_FORMAT))
        handler._boxpath = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
        # uvicorn's root config would print every record a second time
        logger.propagate = False

    return logger
