"""Desktop entry rendering.

Builds the text of a freedesktop.org desktop entry from an EntryDraft.
The result is printed by the CLI; dtop never writes .desktop files itself.
"""

from dtop.constants import (
    DESKTOP_CATEGORY_SEPARATOR,
    DESKTOP_SECTION_HEADER,
    DESKTOP_TERMINAL_LAUNCHER,
)
from dtop.domain.entry import EntryDraft


def build_exec_line(draft: EntryDraft) -> str:
    """Return the Exec value, wrapped in the terminal launcher if needed."""
    prefix = DESKTOP_TERMINAL_LAUNCHER if draft.terminal else ""
    return f"{prefix}{draft.exec_path}"


def generate_desktop_content(draft: EntryDraft) -> str:
    """Generate desktop entry content.

    The Comment line is omitted when the comment is empty. Categories are
    joined with ``;`` without a trailing separator.

    Args:
        draft: Populated entry draft.

    Returns:
        Desktop entry text ending with a newline.

    """
    content_lines = [
        DESKTOP_SECTION_HEADER,
        f"Name={draft.name}",
    ]

    if draft.comment:
        content_lines.append(f"Comment={draft.comment}")

    content_lines.extend(
        [
            f"Exec={build_exec_line(draft)}",
            f"Type={draft.entry_type.value}",
            f"Icon={draft.icon}",
            f"Categories={DESKTOP_CATEGORY_SEPARATOR.join(draft.categories)}",
        ]
    )

    # Add newline at end
    content_lines.append("")

    return "\n".join(content_lines)
