"""Handler creation for the logging system.

Only a console handler exists: dtop never writes files, logs included.
Records travel through a QueueHandler so logging calls made while the
event loop is running never block on terminal I/O.
"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener

from dtop.constants import (
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    ROOT_LOGGER_NAME,
)
from dtop.logger.formatters import HybridConsoleFormatter
from dtop.logger.state import LoggerState


def _create_console_handler(
    console_level: str,
    use_color: bool,  # noqa: FBT001
) -> logging.StreamHandler:
    """Create and configure the console handler.

    The handler writes to stderr so that stdout only carries the
    generated desktop entry and command output.

    Args:
        console_level: Log level for console (e.g., "DEBUG", "WARNING")
        use_color: Whether level names are colored

    Returns:
        Configured StreamHandler for console output

    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        HybridConsoleFormatter(
            LOG_CONSOLE_FORMAT,
            datefmt=LOG_CONSOLE_DATE_FORMAT,
            use_color=use_color,
        )
    )
    console_handler.setLevel(getattr(logging, console_level, logging.WARNING))
    return console_handler


def setup_root_logger(
    state: LoggerState,
    console_level: str,
    use_color: bool,  # noqa: FBT001
) -> None:
    """Initialize root logger with the console handler via QueueListener.

    Args:
        state: Shared logger state to populate
        console_level: Console log level (e.g., "WARNING")
        use_color: Whether level names are colored

    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handlers
    root_logger.propagate = False

    # Remove any existing handlers (for test isolation)
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    console_handler = _create_console_handler(console_level, use_color)

    log_queue: queue.Queue = queue.Queue(-1)
    state.queue_listener = QueueListener(
        log_queue,
        console_handler,
        respect_handler_level=True,
    )
    state.queue_listener.start()
    state.console_handler = console_handler

    root_logger.addHandler(QueueHandler(log_queue))
