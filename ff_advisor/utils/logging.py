"""Loguru sink configuration."""

import sys
from pathlib import Path

from loguru import logger

from config.settings import Settings

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} - {message}"


def setup_logging(settings: Settings) -> None:
    """Replace the default loguru sink with the configured ones."""
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level, format=LOG_FORMAT)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            rotation="10 MB",
            retention="7 days",
            level=settings.log_level,
            format=LOG_FORMAT,
        )
