"""Categories command: list the registered menu categories."""

from argparse import Namespace

from dtop.cli.commands.base import BaseCommandHandler
from dtop.domain.categories import DESKTOP_CATEGORIES


class CategoriesHandler(BaseCommandHandler):
    """Print the category catalog, one token per line."""

    def execute(self, args: Namespace) -> None:
        for category in DESKTOP_CATEGORIES:
            print(category)
