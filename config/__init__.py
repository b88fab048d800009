"""
Configuration package for the roster manager.

Logging is not configured on import; call
config.logging_config.configure_logging() from the application entry point.
"""
from . import settings

from .settings import (
    ROSTER_CAPACITY,
    AUTOMATIC_ROSTER_PREFIX,
    LOG_LEVEL, LOG_FILE,
)
