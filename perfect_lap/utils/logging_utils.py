"""Logging setup shared by every pipeline stage."""

import logging
from pathlib import Path
from typing import Optional

from perfect_lap.conf.settings import settings


def setup_logger(
    name: str,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    log_dir: Optional[str | Path] = None,
) -> logging.Logger:
    """Configure a logger with console and optional file output.

    Args:
        name: Logger name
        log_level: Level name (defaults to settings.log_level)
        log_file: Optional log file name
        log_dir: Directory for the log file (defaults to settings.logs_path)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel((log_level or settings.log_level).upper())

    formatter = logging.Formatter(settings.log_format)

    # Avoid stacking handlers when called twice for the same name
    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in logger.handlers):
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        logger.addHandler(console)

    if log_file and settings.log_to_file:
        log_path = Path(log_dir or settings.logs_path)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path / log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger.

    Handlers are attached by setup_logger() on the application logger;
    module loggers propagate to it.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
