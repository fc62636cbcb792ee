"""
Centralized error handling and logging system.

This module provides:
- Logging to a daily file plus warnings on the console
- Exception types for configuration and vault problems
- A helper to log unexpected errors with their traceback
"""
import logging
import traceback
from pathlib import Path
from typing import Optional
from datetime import datetime

# Setup logging directory
LOG_DIR = Path(__file__).resolve().parent.parent / "logs"

# Configure logger
logger = logging.getLogger("note_village")
logger.setLevel(logging.DEBUG)

# Prevent duplicate handlers
if not logger.handlers:
    # Console handler for warnings/errors
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(
        logging.Formatter('%(levelname)s: %(message)s')
    )
    logger.addHandler(console_handler)

    # File handler for detailed logs (skipped on read-only installs)
    try:
        LOG_DIR.mkdir(exist_ok=True)
        log_file = LOG_DIR / f"village_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
        logger.addHandler(file_handler)
    except OSError as e:
        logger.warning(f"File logging disabled: {e}")


class VillageError(Exception):
    """Base exception for village errors."""
    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.user_message = user_message or message


class ConfigurationError(VillageError):
    """An option failed its documented bound or a config file is unreadable."""
    def __init__(self, option: str, reason: str, user_message: Optional[str] = None):
        super().__init__(f"Invalid option '{option}': {reason}", user_message)
        self.option = option
        self.reason = reason


class VaultError(VillageError):
    """The vault could not be read."""
    pass


def log_error(
    error: Exception,
    context: str = "",
) -> None:
    """
    Log an error with context information.

    Args:
        error: The exception that occurred
        context: Where the error occurred (e.g., "generate", "load_options")
    """
    error_type = type(error).__name__
    error_msg = str(error)
    trace = traceback.format_exc()

    logger.error(
        f"Error in {context}: {error_type}: {error_msg}\n{trace}",
    )
