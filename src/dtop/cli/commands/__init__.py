"""Command handlers for the dtop CLI."""

from .base import BaseCommandHandler
from .categories import CategoriesHandler
from .create import CreateHandler
from .version import VersionHandler

__all__ = [
    "BaseCommandHandler",
    "CategoriesHandler",
    "CreateHandler",
    "VersionHandler",
]
