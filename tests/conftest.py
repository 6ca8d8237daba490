"""Pytest configuration and fixtures for dtop tests."""

import io
import logging
from collections.abc import Callable, Iterable

import pytest

from dtop.ui.style import OutputStyle


class ScriptedInput:
    """Stand-in for input() that replays answers and records prompts.

    Raises EOFError once the answers are exhausted, like a closed stdin.
    """

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._answers)


class TerminalStream(io.StringIO):
    """In-memory stream that reports itself as a terminal."""

    def isatty(self) -> bool:
        return True


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for dtop loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("dtop"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture
def plain_style() -> OutputStyle:
    """Output style without ANSI codes so assertions match plain text."""
    return OutputStyle(color=False)


@pytest.fixture
def scripted_input() -> Callable[..., ScriptedInput]:
    """Factory for ScriptedInput instances."""

    def factory(*answers: str) -> ScriptedInput:
        return ScriptedInput(answers)

    return factory


@pytest.fixture
def terminal_stdout() -> TerminalStream:
    """Stream standing in for an interactive stdout."""
    return TerminalStream()
