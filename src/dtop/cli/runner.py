"""CLI runner for dtop.

Orchestrates the execution of CLI commands by routing parsed
arguments to the appropriate command handlers.
"""

import os
import sys
from argparse import Namespace
from collections.abc import Mapping, Sequence
from typing import TextIO

from dtop.cli.commands.base import BaseCommandHandler
from dtop.cli.commands.categories import CategoriesHandler
from dtop.cli.commands.create import CreateHandler
from dtop.cli.commands.version import VersionHandler
from dtop.cli.parser import CLIParser
from dtop.config import RuntimeConfig
from dtop.exceptions import PromptAbortedError
from dtop.logger import configure_console, get_logger
from dtop.ui.style import OutputStyle

logger = get_logger(__name__)

DEFAULT_COMMAND = "create"
VERSION_COMMAND = "version"


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(
        self,
        argv: Sequence[str] | None = None,
        environ: Mapping[str, str] | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        """Initialize CLI runner.

        Args:
            argv: Command-line arguments; ``None`` means ``sys.argv[1:]``.
            environ: Environment mapping; ``None`` means ``os.environ``.
            stdout: Standard output stream, checked for a terminal when
                deciding on color; ``None`` means ``sys.stdout``.

        """
        self.argv = argv
        self.environ = os.environ if environ is None else environ
        self.stdout = sys.stdout if stdout is None else stdout
        self.config = RuntimeConfig.from_environment(
            self.environ, stdout=self.stdout
        )
        self.style = OutputStyle(color=self.config.color)
        self.command_handlers: dict[str, BaseCommandHandler] = {}

    def _configure(self, args: Namespace) -> None:
        """Compute the runtime configuration once and apply it.

        Args:
            args: Parsed command-line arguments namespace.

        """
        self.config = RuntimeConfig.from_environment(
            self.environ, args, self.stdout
        )
        self.style = OutputStyle(color=self.config.color)
        configure_console(self.config.console_log_level, self.config.color)
        self._init_command_handlers()

    def _init_command_handlers(self) -> None:
        version_handler = VersionHandler(self.config, self.style)
        self.command_handlers = {
            DEFAULT_COMMAND: CreateHandler(self.config, self.style),
            VERSION_COMMAND: version_handler,
            "v": version_handler,
            "categories": CategoriesHandler(self.config, self.style),
        }

    @staticmethod
    def _resolve_command(args: Namespace) -> str:
        if getattr(args, "check_version", False):
            return VERSION_COMMAND
        return getattr(args, "command", None) or DEFAULT_COMMAND

    def run(self) -> None:
        """Run the CLI application.

        Parses arguments, builds the runtime configuration and routes to
        the appropriate handler. Cancellation and unexpected errors are
        reported on stderr and end the process with status 1.
        """
        try:
            args = CLIParser(self.argv, self.style).parse_args()
            self._configure(args)
            self._execute_command(self._resolve_command(args), args)

        except (KeyboardInterrupt, PromptAbortedError):
            logger.debug("Operation cancelled by user")
            print(
                self.style.red("\nOperation cancelled by user"),
                file=sys.stderr,
            )
            sys.exit(1)
        except Exception as e:
            logger.debug("Unexpected error", exc_info=True)
            print(self.style.red(str(e) or repr(e)), file=sys.stderr)
            sys.exit(1)

    def _execute_command(self, command: str, args: Namespace) -> None:
        """Execute the specified command with the appropriate handler.

        Args:
            command: Command name after alias and flag resolution.
            args: Parsed command-line arguments namespace.

        """
        if command not in self.command_handlers:
            print(
                self.style.red(f"Unknown command: {command}"), file=sys.stderr
            )
            sys.exit(1)

        logger.debug("Running command %s", command)
        self.command_handlers[command].execute(args)
