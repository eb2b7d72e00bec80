"""
Logging setup for answer sheet helpers.

All modules log through the shared loguru ``logger``; this only installs sinks.
"""
from __future__ import annotations

import sys

from loguru import logger

from config import Settings, get_settings

LOG_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | <cyan>{name}</cyan> - {message}"


def configure_logging(settings: Settings | None = None) -> None:
    """Replace the default loguru sink with the configured stderr/file sinks."""
    settings = settings or get_settings()

    logger.remove()
    logger.add(sys.stderr, level=settings.log_level, format=LOG_FORMAT)
    if settings.log_file:
        logger.add(settings.log_file, level=settings.log_level, rotation="10 MB", encoding="utf-8")
    logger.debug(f"Logging configured at {settings.log_level}")
