import traceback
from functools import wraps
from typing import Callable, Optional, Tuple

import yaml

from .logging_config import get_log_file_path, get_logger

logger = get_logger(__name__)


class UserFriendlyError(Exception):
    """Exception with a user-friendly message"""
    def __init__(self, user_message: str, technical_message: Optional[str] = None):
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        super().__init__(self.technical_message)


# Error message mappings
ERROR_MESSAGES = {
    # File errors
    FileNotFoundError: lambda e: (
        "File not found",
        f"The file could not be found. It may have been moved or deleted.\n\n"
        f"Path: {getattr(e, 'filename', None) or 'Unknown'}"
    ),
    PermissionError: lambda e: (
        "Permission denied",
        "Unable to access this file. Please check that you have permission "
        "to read/write to this location."
    ),
    IsADirectoryError: lambda e: (
        "Invalid file",
        "Expected a file but got a folder. Please select a text file."
    ),
    UnicodeDecodeError: lambda e: (
        "Unreadable text",
        "The input is not valid UTF-8 text. Save the file as UTF-8 and try again."
    ),

    # Config errors
    yaml.YAMLError: lambda e: (
        "Settings file error",
        "Your settings file could not be parsed. Check the YAML syntax "
        "or delete the file to use the defaults."
    ),
    "mask_char": lambda e: (
        "Invalid mask character",
        "The mask character must be exactly one character, for example '*' or '#'."
    ),
    "category": lambda e: (
        "Invalid category",
        "Custom terms must use one of: mild, severe, hate, general."
    ),
    "log level": lambda e: (
        "Invalid log level",
        "logging.level must be a level name such as DEBUG or INFO, or a number like 10."
    ),

    # Disk errors
    OSError: lambda e: (
        "Disk error",
        "Unable to read or write files. Please check:\n\n"
        "• The path exists\n"
        "• The drive isn't disconnected\n"
        "• You have permission to the folder"
    ),
}


def get_friendly_message(error: Exception) -> Tuple[str, str]:
    """Get user-friendly title and message for an error"""
    error_str = str(error).lower()

    # Check exact type matches first
    for error_type, msg_func in ERROR_MESSAGES.items():
        if isinstance(error_type, type) and isinstance(error, error_type):
            return msg_func(error)

    # Check string matches in error message (case-insensitive)
    for key, msg_func in ERROR_MESSAGES.items():
        if isinstance(key, str) and key.lower() in error_str:
            return msg_func(error)

    # Default fallback
    return (
        "Something went wrong",
        f"An unexpected error occurred:\n\n{str(error)[:200]}\n\n"
        "Please try again. If the problem persists, check the log file:\n"
        f"{get_log_file_path()}"
    )


def handle_error(error: Exception, context: str = "") -> Tuple[str, str]:
    """Log error and return friendly message"""
    logger.error(f"Error in {context}: {error}")
    logger.debug(traceback.format_exc())

    return get_friendly_message(error)


def safe_operation(context: str = "operation"):
    """Decorator for safe error handling"""
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except UserFriendlyError:
                raise  # Already friendly, pass through
            except Exception as e:
                title, message = handle_error(e, context)
                raise UserFriendlyError(f"{title}: {message}", str(e)) from e
        return wrapper
    return decorator
