"""Interactive line prompts with re-ask policy.

Prompter offers three primitives:

- question(): free text with optional default, allowed values, minimum
  length and a validation callback.
- question_path(): like question() but the answer is normalized to an
  absolute path before validation.
- key_in_yn(): a yes/no confirmation.

Prompts and re-ask notices are written to stderr so that standard output
only carries the result. Any rejected answer prints a short notice and
asks again. Closing input (Ctrl+D) raises PromptAbortedError.
"""

import os
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from dtop.exceptions import PromptAbortedError
from dtop.logger import get_logger
from dtop.ui.style import OutputStyle

logger = get_logger(__name__)

REASK_MESSAGE = "Input another, please."
YES_ANSWERS = ("y", "yes")


def read_line(prompt: str) -> str:
    """Write prompt to stderr and read one line from stdin."""
    print(prompt, end="", file=sys.stderr, flush=True)
    return input()


def normalize_path(raw: str) -> str:
    """Expand ``~`` and make a path absolute; empty input stays empty."""
    raw = raw.strip()
    if not raw:
        return ""
    return str(Path(raw).expanduser().absolute())


def match_limit(answer: str, limit: Sequence[str]) -> str | None:
    """Return the allowed value matching answer, ignoring case."""
    wanted = answer.strip().lower()
    for allowed in limit:
        if allowed.lower() == wanted:
            return allowed
    return None


class Prompter:
    """Blocking console prompts."""

    def __init__(
        self,
        style: OutputStyle,
        input_func: Callable[[str], str] = read_line,
        path_exists: Callable[[str], bool] = os.path.exists,
    ) -> None:
        """Initialize the prompter.

        Args:
            style: Output style for prompt and notice text
            input_func: Reads one line after writing the prompt
            path_exists: Existence check used by callers' validators

        """
        self.style = style
        self._input = input_func
        self.path_exists = path_exists

    def _read(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except EOFError as e:
            msg = "input closed"
            raise PromptAbortedError(msg) from e

    def _reject(self, answer: str) -> None:
        logger.debug("Rejected answer: %r", answer)
        print(self.style.red(REASK_MESSAGE), file=sys.stderr)

    def question(
        self,
        prompt: str,
        *,
        default_input: str | None = None,
        limit: Sequence[str] | None = None,
        min_length: int = 0,
        validate: Callable[[str], bool] | None = None,
    ) -> str:
        """Ask until an acceptable answer is given.

        Surrounding whitespace is trimmed before any check, so a blank
        answer counts as empty.

        Args:
            prompt: Prompt text, already styled
            default_input: Value used when the answer is empty
            limit: Allowed values, matched case-insensitively; the canonical
                spelling is returned
            min_length: Minimum answer length
            validate: Callback returning False to reject the answer

        Returns:
            Accepted answer.

        Raises:
            PromptAbortedError: If input is closed.

        """
        while True:
            answer = self._read(prompt).strip()
            if not answer and default_input is not None:
                answer = default_input

            if len(answer) < min_length:
                self._reject(answer)
                continue

            if limit is not None:
                matched = match_limit(answer, limit)
                if matched is None:
                    self._reject(answer)
                    continue
                answer = matched

            if validate is not None and not validate(answer):
                self._reject(answer)
                continue

            return answer

    def question_path(
        self,
        prompt: str,
        *,
        min_length: int = 0,
        validate: Callable[[str], bool] | None = None,
    ) -> str:
        """Ask for a filesystem path.

        The answer is trimmed, ``~`` is expanded and relative paths are
        resolved against the current directory before min_length and
        validate are applied. Existence is never checked here.

        Returns:
            Accepted absolute path, or ``""`` if empty answers are allowed.

        """
        while True:
            answer = normalize_path(self._read(prompt))

            if len(answer) < min_length:
                self._reject(answer)
                continue

            if validate is not None and not validate(answer):
                self._reject(answer)
                continue

            return answer

    def key_in_yn(self, prompt: str) -> bool:
        """Ask a yes/no question; only ``y``/``yes`` count as yes."""
        answer = self._read(f"{prompt} [y/n]: ")
        return answer.strip().lower() in YES_ANSWERS
