"""Tests for runtime configuration."""

import io
from argparse import Namespace

import pytest

from dtop.config import RuntimeConfig, color_enabled, is_terminal


@pytest.mark.parametrize(
    ("environ", "expected"),
    [
        ({}, True),
        ({"NO_COLOR": ""}, True),
        ({"NO_COLOR": "1"}, False),
        ({"NO_COLOR": "anything"}, False),
    ],
)
def test_color_enabled(environ, expected):
    assert color_enabled(environ) is expected


def test_defaults():
    config = RuntimeConfig.from_environment({})

    assert config.color is True
    assert config.console_log_level == "WARNING"
    assert config.registry_url == "https://pypi.org/pypi/dtop/json"
    assert config.registry_timeout == 5.0


def test_flags_override_environment():
    args = Namespace(no_color=True, verbose=True)
    config = RuntimeConfig.from_environment({}, args)

    assert config.color is False
    assert config.console_log_level == "DEBUG"


def test_flag_cannot_reenable_color():
    args = Namespace(no_color=False, verbose=False)
    config = RuntimeConfig.from_environment({"NO_COLOR": "1"}, args)
    assert config.color is False


def test_redirected_stdout_disables_color(terminal_stdout):
    assert RuntimeConfig.from_environment({}, stdout=terminal_stdout).color
    assert (
        RuntimeConfig.from_environment({}, stdout=io.StringIO()).color
        is False
    )


def test_closed_stream_is_not_a_terminal():
    stream = io.StringIO()
    stream.close()
    assert is_terminal(stream) is False
    assert color_enabled({}, stream) is False
