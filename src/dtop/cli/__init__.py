"""Command-line interface for dtop."""

from .runner import CLIRunner

__all__ = ["CLIRunner"]
