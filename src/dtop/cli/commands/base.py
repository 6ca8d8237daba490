"""Base command handler for dtop CLI commands.

This module provides the abstract base class that all command handlers
inherit from, ensuring a consistent interface across commands.
"""

from abc import ABC, abstractmethod
from argparse import Namespace

from dtop.config import RuntimeConfig
from dtop.ui.style import OutputStyle


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    CLIRunner acts as the composition root: it computes the runtime
    configuration once and injects it, together with the output style,
    into every handler.
    """

    def __init__(self, config: RuntimeConfig, style: OutputStyle) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            config: Runtime configuration for this invocation
            style: Output style derived from the configuration

        """
        self.config = config
        self.style = style

    @abstractmethod
    def execute(self, args: Namespace) -> None:
        """Execute the command with the given arguments.

        Args:
            args: Parsed command-line arguments

        """
