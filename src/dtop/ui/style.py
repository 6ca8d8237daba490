"""ANSI output styling.

Whether color is used is decided once per run (see dtop.config) and
carried by an OutputStyle instance handed to each component that prints.
"""

from dataclasses import dataclass

from dtop.constants import ANSI_COLORS


@dataclass(frozen=True, slots=True)
class OutputStyle:
    """Wraps text in ANSI color codes when color is enabled."""

    color: bool = True

    def paint(self, text: str, color: str) -> str:
        """Return text wrapped in the named color.

        Args:
            text: Text to style
            color: Key of ANSI_COLORS, e.g. ``"green"``

        Returns:
            Styled text, or text unchanged when color is disabled.

        """
        if not self.color or not text:
            return text
        return f"{ANSI_COLORS[color]}{text}{ANSI_COLORS['reset']}"

    def red(self, text: str) -> str:
        return self.paint(text, "red")

    def green(self, text: str) -> str:
        return self.paint(text, "green")

    def yellow(self, text: str) -> str:
        return self.paint(text, "yellow")

    def blue(self, text: str) -> str:
        return self.paint(text, "blue")

    def magenta(self, text: str) -> str:
        return self.paint(text, "magenta")

    def cyan(self, text: str) -> str:
        return self.paint(text, "cyan")
