"""Prompt sequence for the fields of a desktop entry.

Fields are asked in a fixed order: name, comment, exec path, terminal,
type, icon path and categories.
"""

from dtop.constants import CATEGORY_REFERENCE_URL
from dtop.domain.categories import filter_categories
from dtop.domain.entry import EntryDraft, EntryType
from dtop.logger import get_logger
from dtop.ui.prompts import Prompter

logger = get_logger(__name__)

ENTRY_TYPE_CHOICES = tuple(member.value for member in EntryType)


def _ask_exec_path(prompter: Prompter) -> str:
    """Ask for the executable; a missing file needs explicit confirmation."""

    def validate(path: str) -> bool:
        return prompter.path_exists(path) or prompter.key_in_yn(
            f"File '{path}' does not exist. Continue?"
        )

    return prompter.question_path(
        prompter.style.magenta("Path to the executable: "),
        min_length=1,
        validate=validate,
    )


def _ask_icon_path(prompter: Prompter) -> str:
    # Icon existence is intentionally not enforced, only emptiness.
    return prompter.question_path(
        prompter.style.magenta("Path to the icon: "),
        validate=lambda path: len(path) > 0,
    )


def _ask_categories(prompter: Prompter) -> tuple[str, ...]:
    raw = prompter.question(
        "Space-separated categories to show this app in "
        f"(Enter to skip, see {prompter.style.cyan(CATEGORY_REFERENCE_URL)} "
        "or run 'dtop categories' for info): "
    )
    return tuple(filter_categories(raw))


def collect_entry_draft(prompter: Prompter) -> EntryDraft:
    """Run the prompt sequence and return the populated draft.

    Args:
        prompter: Prompt facility bound to the terminal

    Returns:
        EntryDraft built from the user's answers.

    Raises:
        PromptAbortedError: If input is closed before all fields are given.

    """
    style = prompter.style

    name = prompter.question(
        style.magenta("Name of the application: "), min_length=1
    )
    comment = prompter.question(
        style.magenta("Comment for the application (Enter to skip): ")
    )
    exec_path = _ask_exec_path(prompter)
    terminal = prompter.key_in_yn("Run in terminal?")
    entry_type = prompter.question(
        style.magenta("Type (Application/Link/Directory): "),
        default_input=EntryType.APPLICATION.value,
        limit=ENTRY_TYPE_CHOICES,
    )
    icon = _ask_icon_path(prompter)
    categories = _ask_categories(prompter)

    draft = EntryDraft(
        name=name,
        comment=comment,
        exec_path=exec_path,
        terminal=terminal,
        entry_type=EntryType.from_text(entry_type),
        icon=icon,
        categories=categories,
    )
    logger.debug("Collected entry draft: %s", draft)
    return draft
