"""Create command: the default interactive flow.

Asks for each desktop entry field and prints the assembled entry on
standard output. Notices and prompts go to stderr, so redirecting stdout
yields a usable .desktop file. Nothing is written to disk.
"""

import sys
from argparse import Namespace
from collections.abc import Callable

from dtop.cli.commands.base import BaseCommandHandler
from dtop.config import RuntimeConfig
from dtop.constants import GNU_NOTICE, INTERACTIVE_NOTICE
from dtop.core.desktop_entry import generate_desktop_content
from dtop.logger import get_logger
from dtop.ui.entry_prompts import collect_entry_draft
from dtop.ui.prompts import Prompter, read_line
from dtop.ui.style import OutputStyle

logger = get_logger(__name__)


class CreateHandler(BaseCommandHandler):
    """Run the prompt sequence and print the desktop entry."""

    def __init__(
        self,
        config: RuntimeConfig,
        style: OutputStyle,
        input_func: Callable[[str], str] = read_line,
    ) -> None:
        """Initialize the handler.

        Args:
            config: Runtime configuration for this invocation
            style: Output style derived from the configuration
            input_func: Line reader passed to the Prompter

        """
        super().__init__(config, style)
        self.input_func = input_func

    def _print_notice(self) -> None:
        print(self.style.yellow(GNU_NOTICE), file=sys.stderr)
        print(file=sys.stderr)
        print(self.style.cyan(INTERACTIVE_NOTICE), file=sys.stderr)
        print(file=sys.stderr)

    def execute(self, args: Namespace) -> None:
        """Collect the entry draft and print the rendered entry."""
        self._print_notice()

        prompter = Prompter(self.style, input_func=self.input_func)
        draft = collect_entry_draft(prompter)
        content = generate_desktop_content(draft)
        logger.debug("Rendered desktop entry for %s", draft.name)

        print(file=sys.stderr)
        print(self.style.green(content.rstrip("\n")), flush=True)
        print(file=sys.stderr)
