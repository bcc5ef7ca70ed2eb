"""Core SchoolDir utilities.

This module exports core utilities for use throughout the application.
"""

from schooldir.core.config import Settings, get_settings
from schooldir.core.logging import (
    LoggingContext,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
    new_correlation_id,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
    "bind_correlation_id",
    "clear_context",
    "new_correlation_id",
]
