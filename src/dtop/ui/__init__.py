"""Terminal interaction: output styling and interactive prompts."""

from dtop.ui.prompts import Prompter
from dtop.ui.style import OutputStyle

__all__ = ["OutputStyle", "Prompter"]
