"""Logging setup for the intake service."""

from __future__ import annotations

import logging

LOGGER_NAME = "intake"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the service logger, or a child of it when ``name`` is given."""
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single console handler to the service logger."""
    logger = get_logger()
    logger.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))
    if not any(getattr(h, "_intake_console", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._intake_console = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
