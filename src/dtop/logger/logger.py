"""Main logger module providing public API functions.

- setup_logging(): Configure logging with the QueueHandler architecture
- get_logger(): Get or create logger instance
- configure_console(): Apply per-run console level and color settings
- flush_all_handlers(): Ensure all pending log records are written
- clear_logger_state(): Clear logger state for testing
"""

import atexit
import contextlib
import logging
import time

from dtop.constants import DEFAULT_CONSOLE_LOG_LEVEL, ROOT_LOGGER_NAME
from dtop.logger.formatters import HybridConsoleFormatter
from dtop.logger.handlers import setup_root_logger
from dtop.logger.state import get_state


def flush_all_handlers() -> None:
    """Flush all handlers in the QueueListener to ensure writes complete.

    Waits for the queue to drain, then flushes each handler. Used before
    exit and by tests that inspect console output.
    """
    state = get_state()
    listener = state.queue_listener
    if listener is not None:
        # QueueListener doesn't use task_done(), so poll the queue
        timeout = 5.0
        start_time = time.time()
        while not listener.queue.empty():
            if time.time() - start_time > timeout:
                break
            time.sleep(0.01)

        for handler in listener.handlers:
            with contextlib.suppress(OSError, ValueError):
                handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str = DEFAULT_CONSOLE_LOG_LEVEL,
    use_color: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure logging and return the requested logger.

    The root ``dtop`` logger is initialized exactly once; child loggers
    such as ``dtop.core.registry`` propagate to it.

    Args:
        name: Logger name, typically __name__ for module-level loggers
        console_level: Console log level used on first initialization
        use_color: Whether console level names are colored on first
            initialization

    Returns:
        Logger instance (singleton per name via logging.getLogger)

    """
    state = get_state()
    with state.lock:
        if not state.initialized:
            setup_root_logger(state, console_level, use_color)

    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get or create logger instance.

    Best Practice:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Fetching %s", url)  # %-style formatting only

    Args:
        name: Logger name, typically __name__ for module loggers

    Returns:
        Configured logger instance

    """
    return setup_logging(name=name)


def configure_console(
    console_level: str,
    use_color: bool,  # noqa: FBT001
) -> None:
    """Apply the per-run console level and color flag.

    Called once by the CLI runner after the runtime configuration has been
    computed, so the color decision is passed in rather than read from a
    module-wide flag.

    Args:
        console_level: Level name such as "WARNING" or "DEBUG"
        use_color: Whether console level names are colored

    """
    setup_logging()
    handler = get_state().console_handler
    if handler is None:
        return

    handler.setLevel(getattr(logging, console_level, logging.WARNING))
    formatter = handler.formatter
    if isinstance(formatter, HybridConsoleFormatter):
        formatter.use_color = use_color


def clear_logger_state() -> None:
    """Clear logger state for testing purposes.

    Stops the QueueListener, removes handlers from ``dtop`` loggers and
    drops the console handler.

    Warning:
        Intended for tests only.

    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            state.queue_listener = None

        state.console_handler = None

        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name.startswith(ROOT_LOGGER_NAME):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)
