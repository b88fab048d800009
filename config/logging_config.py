"""
Logging configuration for the roster manager.

Sets up console logging with rich formatting and file logging with rotation.
"""
import logging
from logging.handlers import RotatingFileHandler
from rich.logging import RichHandler
from pathlib import Path

from . import settings

def configure_logging(level=None, log_file=None):
    """
    Configure the root logger.

    Args:
        level (str, optional): Log level name, defaults to settings.LOG_LEVEL
        log_file (Path, optional): Log file path, defaults to settings.LOG_FILE

    Returns:
        logging.Logger: The configured root logger
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    # Create logs directory if it doesn't exist
    log_file = Path(log_file or settings.LOG_FILE)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(rich_tracebacks=True, markup=True)
    console_handler.setLevel(log_level)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10*1024*1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    logging.getLogger(__name__).debug(f"Logging configured at level {level_name}")
    return root_logger
