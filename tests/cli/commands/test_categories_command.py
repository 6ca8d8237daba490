"""Tests for the categories command."""

from argparse import Namespace

from dtop.cli.commands.categories import CategoriesHandler
from dtop.config import RuntimeConfig
from dtop.domain.categories import DESKTOP_CATEGORIES


def test_categories_lists_catalog_one_per_line(plain_style, capsys):
    CategoriesHandler(RuntimeConfig(), plain_style).execute(Namespace())

    lines = capsys.readouterr().out.splitlines()
    assert lines == list(DESKTOP_CATEGORIES)
