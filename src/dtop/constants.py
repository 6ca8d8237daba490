"""Centralized constants module for dtop.

This module serves as the single source of truth for all shared constants
across the dtop codebase. Constants are organized by logical categories
and use typing.Final annotations to ensure immutability.

Usage:
    from dtop.constants import PACKAGE_NAME
"""

from typing import Final

# =============================================================================
# Package Constants
# =============================================================================

PACKAGE_NAME: Final[str] = "dtop"

GNU_NOTICE: Final[str] = (
    "dtop  Copyright (C) 2023  Akhil Pillai\n"
    "This program comes with ABSOLUTELY NO WARRANTY.\n"
    "This is free software, and you are welcome to redistribute it "
    "under certain conditions."
)

INTERACTIVE_NOTICE: Final[str] = (
    "Press Ctrl+C to exit. For help, exit and run 'dtop -h'.\n"
    "Run 'dtop -v' to check for updates."
)

CATEGORY_REFERENCE_URL: Final[str] = (
    "https://specifications.freedesktop.org/menu-spec/latest/"
)

# =============================================================================
# Registry Constants
# =============================================================================

REGISTRY_NAME: Final[str] = "PyPI"

# Formatted with the package name
REGISTRY_URL_TEMPLATE: Final[str] = "https://pypi.org/pypi/{package}/json"

REGISTRY_TIMEOUT_SECONDS: Final[float] = 5.0

# =============================================================================
# Output Styling Constants
# =============================================================================

NO_COLOR_ENV: Final[str] = "NO_COLOR"

ANSI_COLORS: Final[dict[str, str]] = {
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "reset": "\033[0m",
}

# =============================================================================
# Logging Constants
# =============================================================================

ROOT_LOGGER_NAME: Final[str] = "dtop"

DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
VERBOSE_CONSOLE_LOG_LEVEL: Final[str] = "DEBUG"

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"

# Color mapping for console output levels
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

# =============================================================================
# Desktop (.desktop) entry Constants
# =============================================================================

DESKTOP_SECTION_HEADER: Final[str] = "[Desktop Entry]"

# Prefix applied to Exec when the application runs in a terminal
DESKTOP_TERMINAL_LAUNCHER: Final[str] = "x-terminal-emulator -e "

DESKTOP_CATEGORY_SEPARATOR: Final[str] = ";"
