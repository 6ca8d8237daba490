"""Tests for the interactive create command."""

from argparse import Namespace

import pytest

from dtop.cli.commands.create import CreateHandler
from dtop.config import RuntimeConfig
from dtop.exceptions import PromptAbortedError
from dtop.ui.style import OutputStyle


def test_create_prints_entry(plain_style, scripted_input, capsys, tmp_path):
    executable = tmp_path / "foo"
    executable.write_text("#!/bin/sh\n")
    answers = scripted_input(
        "Foo",
        "",
        str(executable),
        "n",
        "",
        "/icons/foo.png",
        "Utility Blah Office",
    )

    handler = CreateHandler(RuntimeConfig(color=False), plain_style, answers)
    handler.execute(Namespace())

    captured = capsys.readouterr()
    assert "ABSOLUTELY NO WARRANTY" in captured.err
    assert captured.out == (
        "[Desktop Entry]\n"
        "Name=Foo\n"
        f"Exec={executable}\n"
        "Type=Application\n"
        "Icon=/icons/foo.png\n"
        "Categories=Utility;Office\n"
    )


def test_create_colors_entry_when_enabled(scripted_input, capsys, tmp_path):
    executable = tmp_path / "foo"
    executable.touch()
    answers = scripted_input(
        "Foo", "", str(executable), "y", "Link", "/i.png", ""
    )

    handler = CreateHandler(RuntimeConfig(), OutputStyle(color=True), answers)
    handler.execute(Namespace())

    out = capsys.readouterr().out
    assert "\033[32m[Desktop Entry]" in out
    assert f"Exec=x-terminal-emulator -e {executable}" in out


def test_create_prints_no_entry_when_aborted(
    plain_style, scripted_input, capsys
):
    handler = CreateHandler(
        RuntimeConfig(color=False), plain_style, scripted_input("Foo")
    )

    with pytest.raises(PromptAbortedError):
        handler.execute(Namespace())

    assert "[Desktop Entry]" not in capsys.readouterr().out
