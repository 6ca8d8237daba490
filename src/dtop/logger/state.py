"""Process-wide state of the root ``dtop`` logger."""

import logging
import threading
from dataclasses import dataclass, field
from logging.handlers import QueueListener


@dataclass
class LoggerState:
    """Handles owned by the root logger once it has been set up.

    The listener's queue is the one the root QueueHandler feeds, so it is
    not tracked separately.
    """

    lock: threading.Lock = field(default_factory=threading.Lock)
    queue_listener: QueueListener | None = None
    console_handler: logging.Handler | None = None

    @property
    def initialized(self) -> bool:
        return self.queue_listener is not None


_state = LoggerState()


def get_state() -> LoggerState:
    """Return the logger state shared by the whole process."""
    return _state
