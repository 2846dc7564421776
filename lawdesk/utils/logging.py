"""
Logging utility module.

Provides the application-wide logging setup (console and optional daily
log file) and small helpers for logging with context.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("lawdesk")


def setup_logging(level: str = "INFO", log_dir: Optional[str] = None):
    """
    Configure root logging for the application.

    Args:
        level: Name of the log level (DEBUG, INFO, ...)
        log_dir: When given, also write logs to a daily file in this directory
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    if log_dir:
        setup_file_logging(log_dir)


def setup_file_logging(log_dir: str = "logs"):
    """
    Set up file logging in addition to console logging.

    Args:
        log_dir: Directory to store log files

    Returns:
        The handler attached to the root logger
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d")
    file_handler = logging.FileHandler(
        log_path / f"app_{timestamp}.log",
        encoding="utf-8"
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.getLogger().addHandler(file_handler)
    return file_handler


def log_error(error: Exception, context: Optional[str] = None):
    """
    Log an error with optional context.

    The full stack trace is only emitted at debug level.

    Args:
        error: Exception to log
        context: Optional context about where/why the error occurred
    """
    if context:
        logger.error(f"{context}: {error.__class__.__name__}: {error}")
    else:
        logger.error(f"{error.__class__.__name__}: {error}")

    logger.debug("Stack trace:", exc_info=error)


def log_warning(message: str, context: Optional[str] = None):
    """
    Log a warning with optional context.
    """
    if context:
        logger.warning(f"{context}: {message}")
    else:
        logger.warning(message)
