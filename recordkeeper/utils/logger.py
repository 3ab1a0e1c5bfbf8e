"""
Logger utility for consistent logging across recordkeeper.

This module provides a standardized way to create and configure loggers
throughout the package, ensuring consistent log formatting and behavior.

Features:
- Consistent log format across all modules
- Configurable log level from settings / environment variables
- Stream handler to stdout for easy viewing in console/terminal
- Optional rotating file handlers for error and debug logs
- Prevents duplicate log handlers when called multiple times
"""

import logging
import logging.handlers
import sys
from typing import Optional
from pathlib import Path

from recordkeeper.utils.config import Settings, get_settings

# Default log format
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
VERBOSE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

PACKAGE_LOGGER = 'recordkeeper'
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5


def _resolve_level(level_name: str) -> int:
    return getattr(logging, level_name.upper(), logging.INFO)


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure global logging for the application.

    This function sets up the root logger with a console handler and,
    when enabled in settings, rotating file handlers for errors and debug
    output. Existing root handlers, and any handlers get_logger() attached
    to package loggers, are removed so each record is written once.

    Args:
        settings: Settings to configure from; defaults to get_settings()

    Returns:
        logging.Logger: The package logger
    """
    settings = settings or get_settings()
    log_level = _resolve_level(settings.LOG_LEVEL)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates when reconfiguring
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Package loggers propagate to root; drop handlers get_logger() attached to them
    for name, package_logger in list(logging.Logger.manager.loggerDict.items()):
        if isinstance(package_logger, logging.Logger) and (
            name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + ".")
        ):
            for handler in package_logger.handlers[:]:
                package_logger.removeHandler(handler)

    verbose_formatter = logging.Formatter(VERBOSE_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    standard_formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    # Console handler (always enabled)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(standard_formatter)
    console_handler.setLevel(logging.DEBUG if settings.DEBUG else log_level)
    root_logger.addHandler(console_handler)

    if settings.ENABLE_FILE_LOGGING or settings.ENABLE_DEBUG_LOG:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)

        if settings.ENABLE_FILE_LOGGING:
            error_file_handler = logging.handlers.RotatingFileHandler(
                log_dir / "error.log",
                maxBytes=MAX_LOG_BYTES,
                backupCount=LOG_BACKUP_COUNT
            )
            error_file_handler.setLevel(logging.ERROR)
            error_file_handler.setFormatter(verbose_formatter)
            root_logger.addHandler(error_file_handler)

        if settings.ENABLE_DEBUG_LOG:
            debug_file_handler = logging.handlers.RotatingFileHandler(
                log_dir / "debug.log",
                maxBytes=MAX_LOG_BYTES,
                backupCount=LOG_BACKUP_COUNT
            )
            debug_file_handler.setLevel(log_level)
            debug_file_handler.setFormatter(verbose_formatter)
            root_logger.addHandler(debug_file_handler)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.info(f"Logging initialized with level {settings.LOG_LEVEL.upper()} ({settings.ENVIRONMENT})")

    return logger


def get_logger(name: Optional[str] = None, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger instance with consistent formatting.

    If neither the logger nor the root logger has handlers yet, a stdout
    handler is attached so messages are visible without calling
    setup_logging() first.

    Args:
        name: Optional name for the logger; defaults to the package logger.
        level: The logging level to set. If None, uses LOG_LEVEL from settings.

    Returns:
        logging.Logger: Configured logger instance ready for use.

    Example:
        ```python
        from recordkeeper.utils.logger import get_logger

        logger = get_logger(__name__)
        logger.info("Inventory loaded")
        ```
    """
    if level is None:
        level = _resolve_level(get_settings().LOG_LEVEL)

    logger = logging.getLogger(name or PACKAGE_LOGGER)
    logger.setLevel(level)

    root_logger = logging.getLogger()
    if not logger.handlers and not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        logger.addHandler(handler)

    return logger
