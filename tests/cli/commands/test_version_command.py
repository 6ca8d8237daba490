"""Tests for the version command."""

import sys
from argparse import Namespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from dtop.cli.commands.version import VersionHandler
from dtop.config import RuntimeConfig
from dtop.exceptions import RegistryError


@pytest.fixture(autouse=True)
def patch_sys_exit(monkeypatch):
    def fake_exit(code=0):
        raise SystemExit(code)

    monkeypatch.setattr(sys, "exit", fake_exit)


@pytest.fixture
def handler(plain_style) -> VersionHandler:
    return VersionHandler(RuntimeConfig(color=False), plain_style)


def test_version_success_prints_local_and_latest(handler, capsys):
    with (
        patch("dtop.cli.commands.version.__version__", "1.2.0"),
        patch.object(
            VersionHandler,
            "fetch_latest_version",
            AsyncMock(return_value="2.0.0"),
        ),
    ):
        handler.execute(Namespace())

    out = capsys.readouterr().out
    assert "Local installation is dtop@1.2.0" in out
    assert "stand by for up to 5 seconds" in out
    assert "dtop@latest version published on PyPI: 2.0.0" in out
    assert "A newer version is available" in out


def test_version_up_to_date(handler, capsys):
    with (
        patch("dtop.cli.commands.version.__version__", "2.0.0"),
        patch.object(
            VersionHandler,
            "fetch_latest_version",
            AsyncMock(return_value="2.0.0"),
        ),
    ):
        handler.execute(Namespace())

    assert "You are running the latest version." in capsys.readouterr().out


def test_version_dev_checkout_skips_comparison(handler, capsys):
    with (
        patch("dtop.cli.commands.version.__version__", "dev"),
        patch.object(
            VersionHandler,
            "fetch_latest_version",
            AsyncMock(return_value="2.0.0"),
        ),
    ):
        handler.execute(Namespace())

    out = capsys.readouterr().out
    assert "2.0.0" in out
    assert "newer version" not in out
    assert "latest version." not in out


def test_version_fetch_failure_exits_1(handler, capsys):
    with patch.object(
        VersionHandler,
        "fetch_latest_version",
        AsyncMock(side_effect=RegistryError("timed out", target="dtop")),
    ):
        with pytest.raises(SystemExit) as exc_info:
            handler.execute(Namespace())

    assert exc_info.value.code == 1
    out = capsys.readouterr().out
    assert "Failed to fetch version info from PyPI" in out
    assert "published on" not in out


def test_version_timeout_from_client_exits_1(handler, capsys):
    """A registry timeout surfaces as a failure notice and status 1."""
    session = MagicMock()
    session.get.side_effect = TimeoutError()
    session_cm = MagicMock()
    session_cm.__aenter__ = AsyncMock(return_value=session)
    session_cm.__aexit__ = AsyncMock(return_value=False)

    with patch(
        "dtop.cli.commands.version.create_http_session",
        return_value=session_cm,
    ) as create_session:
        with pytest.raises(SystemExit) as exc_info:
            handler.execute(Namespace())

    create_session.assert_called_once_with(5.0)
    assert exc_info.value.code == 1
    assert "Failed to fetch version info" in capsys.readouterr().out
