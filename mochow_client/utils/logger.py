"""
Logging utilities for the Mochow client.
Provides centralized logging configuration and utilities.
"""

import logging
import sys
from typing import Optional

from mochow_client.config.settings import settings


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with consistent formatting.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file name (will be saved in logs directory)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper())
    logger.setLevel(log_level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    # Library default: records go to whatever the application configured
    if not (settings.LOG_TO_CONSOLE or log_file):
        logger.addHandler(logging.NullHandler())
        return logger

    formatter = logging.Formatter(settings.LOG_FORMAT)
    # Own handlers; do not print the same record again through the root logger
    logger.propagate = False

    if settings.LOG_TO_CONSOLE:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        settings.LOGS_DIR.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(settings.LOGS_DIR / log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str, log_file: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name
        log_file: Optional log file name

    Returns:
        Logger instance
    """
    return setup_logger(name, log_file=log_file)


class LoggerMixin:
    """Mixin class to add logging capabilities to any class."""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class."""
        if not hasattr(self, '_logger'):
            class_name = self.__class__.__name__
            self._logger = get_logger(f"{self.__class__.__module__}.{class_name}")
        return self._logger
