"""
Centralized logging configuration for Content Filter.

One setup path shared by the CLI and library callers that want file logs.
Logs are stored in ~/.content_filter/logs/ with rotation.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union


# Global flag to prevent duplicate initialization
_logging_initialized = False

LOGGER_NAMESPACE = "content_filter"

# Default log directory
LOG_DIR = Path.home() / ".content_filter" / "logs"
LOG_FILE_NAME = "content_filter.log"


def get_log_dir() -> Path:
    """Get the log directory, creating it if necessary."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    return LOG_DIR


def resolve_level(level: Union[str, int]) -> int:
    """
    Turn a configured log level into a numeric ``logging`` level.

    Accepts level names in any case ("debug", "WARNING") and numeric levels
    (10, 20, ...) as YAML hands them over. Unknown names fall back to INFO
    with a warning; anything else is rejected.

    Raises:
        ValueError: If the level is neither a name nor a non-negative integer
    """
    # bool is an int subclass but never a meaningful level
    if isinstance(level, bool):
        raise ValueError(f"Invalid log level: {level!r}")

    if isinstance(level, int):
        if level < 0:
            raise ValueError(f"Invalid log level: {level!r}")
        return level

    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if isinstance(resolved, int):
            return resolved
        logging.getLogger(LOGGER_NAMESPACE).warning(f"Unknown log level '{level}', using INFO")
        return logging.INFO

    raise ValueError(f"Invalid log level: {level!r}")


def setup_logging(
    level: Union[str, int] = "INFO",
    log_file: Optional[str] = None,
    console: bool = True,
    force: bool = False,
    debug_mode: bool = False,
) -> logging.Logger:
    """
    Configure logging for the content_filter namespace.

    Args:
        level: Log level name (DEBUG, INFO, ...) or numeric level
        log_file: Optional custom log file path. If None, uses default.
        console: Whether to log to console/stderr
        force: Force reconfiguration even if already initialized
        debug_mode: Log everything at DEBUG, file included

    Returns:
        The package logger
    """
    global _logging_initialized

    if _logging_initialized and not force:
        return logging.getLogger(LOGGER_NAMESPACE)

    log_level = logging.DEBUG if debug_mode else resolve_level(level)

    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    root_logger.setLevel(log_level)

    # Close handlers from a previous setup before replacing them
    for handler in list(root_logger.handlers):
        handler.close()
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
    else:
        log_path = get_log_dir() / LOG_FILE_NAME

    log_path.parent.mkdir(parents=True, exist_ok=True)

    # Rotating file handler: 5MB max, keep 3 backups
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG if debug_mode else log_level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _logging_initialized = True

    root_logger.debug(
        f"Logging initialized: level={logging.getLevelName(log_level)}, file={log_path}"
    )

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Usage:
        from content_filter.logging_config import get_logger
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)


def enable_debug_logging(log_file: Optional[str] = None) -> logging.Logger:
    """Enable debug logging mode (can be called at runtime)."""
    return setup_logging(level="DEBUG", log_file=log_file, debug_mode=True, force=True)


def get_log_file_path() -> Path:
    """Get the path to the main log file."""
    return LOG_DIR / LOG_FILE_NAME
