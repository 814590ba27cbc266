"""
entitygen structured logging.

Provides JSON and text formatting with per-interface context injection.
"""

from entitygen.logging.config import (
    EntityGenLogger,
    LogFormat,
    LogLevel,
    configure_logging,
    get_logger,
)
from entitygen.logging.context import LogContext, with_log_context
from entitygen.logging.formatters import JSONFormatter, TextFormatter

__all__ = [
    # Configuration
    "configure_logging",
    "get_logger",
    "EntityGenLogger",
    "LogLevel",
    "LogFormat",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    # Context
    "LogContext",
    "with_log_context",
]
