"""Logging utilities for dtop.

This package provides:
- Colored console output with ANSI color codes (off with NO_COLOR or
  redirected stdout)
- Async-safe logging via QueueHandler/QueueListener
- Hierarchical logger naming (e.g., dtop.core.registry)

Console output goes to stderr; dtop never writes log files.

Usage:
    >>> from dtop.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Dropped categories: %s", tokens)

IMPORTANT RULES FOR CONTRIBUTORS:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls, use %-formatting
"""

from dtop.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from dtop.logger.logger import (
    clear_logger_state,
    configure_console,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from dtop.logger.state import get_state

__all__ = [
    "ColoredConsoleFormatter",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "clear_logger_state",
    "configure_console",
    "flush_all_handlers",
    "get_logger",
    "get_state",
    "setup_logging",
]
