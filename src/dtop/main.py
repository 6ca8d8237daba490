"""Main CLI entry point for dtop.

This module provides the minimal entry point for the command-line
interface, delegating all functionality to the CLI runner.
"""

import sys

from dtop.cli import CLIRunner
from dtop.logger import flush_all_handlers, get_logger

logger = get_logger(__name__)


def main() -> None:
    """Run the CLI application.

    Errors are reported by the runner; this is the last guard for an
    interrupt raised outside it.
    """
    logger.debug("CLI started")
    try:
        CLIRunner().run()
        logger.debug("CLI completed successfully")
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        sys.exit(1)
    finally:
        flush_all_handlers()


if __name__ == "__main__":
    main()
