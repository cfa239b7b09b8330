from __future__ import annotations

import sys

from loguru import logger

from frs.config.settings import settings

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}"


def configure_logging(level: str | None = None) -> None:
    """Route loguru output to stderr at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level=(level or settings.log_level).upper(), format=LOG_FORMAT)
