"""Logging configuration for Addressify using loguru."""

import sys
from pathlib import Path

from loguru import logger

from addressify.config import Settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(settings: Settings, verbose: bool = False) -> None:
    """
    Send loguru output to stderr, plus a rotating file when ``log_file`` is set.

    Args:
        settings: Application settings with log level and optional file path.
        verbose: Force DEBUG regardless of the configured level.
    """
    level = "DEBUG" if verbose else settings.log_level.upper()

    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    if not settings.log_file:
        logger.debug("Logging to stderr only at level {}", level)
        return

    log_path = Path(settings.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_path,
        level=level,
        format=FILE_FORMAT,
        rotation="10 MB",
        retention="30 days",
        compression="zip",
    )
    logger.debug("Logging to stderr and {} at level {}", log_path, level)
