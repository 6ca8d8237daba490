"""CLI argument parser for dtop.

Handles parsing of command-line arguments and provides a clean
interface for defining CLI commands and their options.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence
from functools import partial

from dtop import __version__
from dtop.ui.style import OutputStyle


class StyledHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Help formatter painting option names green and their help cyan.

    Colors are applied after argparse has measured and wrapped the text,
    so column alignment is computed on the plain strings.
    """

    def __init__(self, prog: str, style: OutputStyle, **kwargs) -> None:
        super().__init__(prog, **kwargs)
        self._style = style

    def _format_action(self, action: argparse.Action) -> str:
        text = super()._format_action(action)
        invocation = self._format_action_invocation(action)
        return text.replace(invocation, self._style.green(invocation), 1)

    def _split_lines(self, text: str, width: int) -> list[str]:
        lines = super()._split_lines(text, width)
        return [self._style.cyan(line) for line in lines]


class CLIParser:
    """Command-line argument parser for dtop."""

    def __init__(
        self,
        argv: Sequence[str] | None = None,
        style: OutputStyle | None = None,
    ) -> None:
        """Initialize the CLI parser.

        Args:
            argv: Arguments to parse; ``None`` means ``sys.argv[1:]``.
            style: Output style for help text; plain when omitted.

        """
        self.argv = argv
        self.style = style or OutputStyle(color=False)
        self.formatter_class = partial(StyledHelpFormatter, style=self.style)

    def parse_args(self) -> Namespace:
        """Parse command-line arguments.

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self.create_parser()
        return parser.parse_args(self.argv)

    def create_parser(self) -> argparse.ArgumentParser:
        """Build the full parser with global options and subcommands."""
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser

    def _create_main_parser(self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog="dtop",
            description=(
                "Create desktop entry files for GNU/Linux interactively. "
                "Without a command, dtop asks for each field and prints "
                "the resulting entry."
            ),
            formatter_class=self.formatter_class,
            epilog="""
Examples:
  # Answer the prompts and save the entry
  %(prog)s > ~/.local/share/applications/myapp.desktop

  # Print the version and check for updates
  %(prog)s version
  %(prog)s -v

  # List the known menu categories
  %(prog)s categories

Environment:
  NO_COLOR    Disable colored output when set to a non-empty value
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        """Add global options to the main parser.

        ``-v/--version`` runs the same update check as the version command,
        while ``-V`` only prints the installed version string.

        Args:
            parser (argparse.ArgumentParser): The main parser to add
                options to.

        """
        parser.add_argument(
            "-v",
            "--version",
            dest="check_version",
            action="store_true",
            help="Print the version and check for updates",
        )
        parser.add_argument(
            "-V",
            action="version",
            version=__version__,
            help="Print the installed version and exit",
        )
        parser.add_argument(
            "--no-color",
            action="store_true",
            help="Disable colored output (same as setting NO_COLOR)",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging on stderr",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )

        subparsers.add_parser(
            "version",
            aliases=["v"],
            help="Print the version and check for updates",
            formatter_class=self.formatter_class,
        )
        subparsers.add_parser(
            "categories",
            help="List the menu categories accepted in desktop entries",
            formatter_class=self.formatter_class,
        )
