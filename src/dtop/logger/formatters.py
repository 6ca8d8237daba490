"""Logging formatters for console output.

- ColoredConsoleFormatter: Adds ANSI color codes to log levels
- SimpleConsoleFormatter: Shows only message content (no metadata)
- HybridConsoleFormatter: Uses simple format for INFO, structured for others
"""

import logging

from dtop.constants import LOG_COLORS


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter with optional ANSI colors on the level name.

    Colors are applied temporarily during format() and then reverted so
    the shared record is never left modified.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_color: bool = True,  # noqa: FBT001, FBT002
    ) -> None:
        """Initialize formatter.

        Args:
            fmt: Format string for the record
            datefmt: Date format string for timestamps
            use_color: Whether to wrap the level name in ANSI codes

        """
        super().__init__(fmt, datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        r"""Format log record with colors for console output.

        Args:
            record: The log record to format

        Returns:
            Formatted log message, e.g.
            "\033[31mERROR\033[0m - dtop - Error message"

        """
        if self.use_color and record.levelname in LOG_COLORS:
            color = LOG_COLORS[record.levelname]
            reset = LOG_COLORS["RESET"]

            original_levelname = record.levelname
            record.levelname = f"{color}{record.levelname}{reset}"
            try:
                return super().format(record)
            finally:
                record.levelname = original_levelname

        return super().format(record)


class SimpleConsoleFormatter(logging.Formatter):
    """Minimal console formatter that only shows the message content."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record showing only the message."""
        return record.getMessage()


class HybridConsoleFormatter(logging.Formatter):
    """Console formatter with simple format for INFO, structured for others.

    Example Output:
        INFO:     "Fetching package info"
        WARNING:  "12:30:45 - dtop.core.registry - WARNING - Slow response"
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_color: bool = True,  # noqa: FBT001, FBT002
    ) -> None:
        """Initialize hybrid formatter with structured format template.

        Args:
            fmt: Format string for structured messages (non-INFO levels)
            datefmt: Date format string for timestamps
            use_color: Whether structured messages get colored level names

        """
        super().__init__(fmt, datefmt)
        self._simple_formatter = SimpleConsoleFormatter()
        self._colored_formatter = ColoredConsoleFormatter(
            fmt, datefmt, use_color=use_color
        )

    @property
    def use_color(self) -> bool:
        """Whether level names are colored."""
        return self._colored_formatter.use_color

    @use_color.setter
    def use_color(self, value: bool) -> None:
        self._colored_formatter.use_color = value

    def format(self, record: logging.LogRecord) -> str:
        """Format log record using simple or structured format by level."""
        if record.levelno == logging.INFO:
            return self._simple_formatter.format(record)
        return self._colored_formatter.format(record)
