"""Tests for desktop entry rendering."""

from dataclasses import replace

import pytest

from dtop.core.desktop_entry import build_exec_line, generate_desktop_content
from dtop.domain.entry import EntryDraft, EntryType


@pytest.fixture
def draft() -> EntryDraft:
    return EntryDraft(
        name="Foo",
        comment="",
        exec_path="/usr/bin/foo",
        terminal=False,
        entry_type=EntryType.APPLICATION,
        icon="/icons/foo.png",
        categories=("Utility", "Office"),
    )


def test_generate_desktop_content_scenario(draft):
    content = generate_desktop_content(draft)

    assert content == (
        "[Desktop Entry]\n"
        "Name=Foo\n"
        "Exec=/usr/bin/foo\n"
        "Type=Application\n"
        "Icon=/icons/foo.png\n"
        "Categories=Utility;Office\n"
    )


def test_empty_comment_omits_comment_line(draft):
    assert "Comment=" not in generate_desktop_content(draft)


def test_comment_line_follows_name(draft):
    content = generate_desktop_content(
        replace(draft, comment="Does foo things")
    )
    lines = content.splitlines()
    assert lines[1] == "Name=Foo"
    assert lines[2] == "Comment=Does foo things"


def test_terminal_wraps_exec_with_launcher(draft):
    terminal_draft = replace(draft, terminal=True)

    assert build_exec_line(terminal_draft) == (
        "x-terminal-emulator -e /usr/bin/foo"
    )
    assert (
        "Exec=x-terminal-emulator -e /usr/bin/foo\n"
        in generate_desktop_content(terminal_draft)
    )


@pytest.mark.parametrize("entry_type", list(EntryType))
def test_type_line_uses_enum_value(draft, entry_type):
    content = generate_desktop_content(
        replace(draft, entry_type=entry_type)
    )
    assert f"Type={entry_type.value}\n" in content


def test_no_categories_renders_empty_value(draft):
    content = generate_desktop_content(
        replace(draft, categories=())
    )
    assert content.endswith("Categories=\n")


def test_generate_desktop_content_is_idempotent(draft):
    assert generate_desktop_content(draft) == generate_desktop_content(draft)

