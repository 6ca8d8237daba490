"""Domain types for dtop: the entry draft and the category catalog."""

from dtop.domain.categories import (
    DESKTOP_CATEGORIES,
    filter_categories,
    is_known,
)
from dtop.domain.entry import EntryDraft, EntryType

__all__ = [
    "DESKTOP_CATEGORIES",
    "EntryDraft",
    "EntryType",
    "filter_categories",
    "is_known",
]
