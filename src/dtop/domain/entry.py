"""Entry draft data model.

A draft lives for one invocation: it is filled field by field by the
prompt sequence, rendered once and then discarded.
"""

from dataclasses import dataclass
from enum import Enum


class EntryType(Enum):
    """Desktop entry ``Type`` values."""

    APPLICATION = "Application"
    LINK = "Link"
    DIRECTORY = "Directory"

    @classmethod
    def from_text(cls, value: str) -> "EntryType":
        """Parse a type name, ignoring case and surrounding whitespace.

        Args:
            value: Text such as ``"Application"`` or ``"link"``.

        Returns:
            Matching EntryType.

        Raises:
            ValueError: If value does not name a known type.

        """
        wanted = value.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        msg = f"Unknown entry type: {value!r}"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class EntryDraft:
    """Fields collected from the user for one desktop entry."""

    name: str
    exec_path: str
    icon: str
    comment: str = ""
    terminal: bool = False
    entry_type: EntryType = EntryType.APPLICATION
    categories: tuple[str, ...] = ()
