"""Runtime configuration for a single dtop invocation.

Settings are computed once at startup from the process environment and the
parsed command-line arguments, then passed explicitly to the components
that need them. Nothing is read from or written to disk.
"""

from argparse import Namespace
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TextIO

from dtop.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    NO_COLOR_ENV,
    PACKAGE_NAME,
    REGISTRY_TIMEOUT_SECONDS,
    REGISTRY_URL_TEMPLATE,
    VERBOSE_CONSOLE_LOG_LEVEL,
)


def is_terminal(stream: TextIO | None) -> bool:
    """Return True when stream is attached to a terminal."""
    try:
        return bool(getattr(stream, "isatty", lambda: False)())
    except ValueError:
        # closed stream
        return False


def color_enabled(
    environ: Mapping[str, str], stream: TextIO | None = None
) -> bool:
    """Decide whether ANSI styling is applied.

    Color is off when NO_COLOR is set to any non-empty value, or when
    stream (the one the entry is printed on) is not a terminal. Passing
    no stream only consults the environment.
    """
    if environ.get(NO_COLOR_ENV, ""):
        return False
    return stream is None or is_terminal(stream)


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Immutable settings for one run of the CLI.

    Attributes:
        color: Whether ANSI styling is applied to output.
        console_log_level: Level name for the console log handler.
        registry_url: URL of the package metadata document.
        registry_timeout: Total timeout in seconds for the registry lookup.

    """

    color: bool = True
    console_log_level: str = DEFAULT_CONSOLE_LOG_LEVEL
    registry_url: str = REGISTRY_URL_TEMPLATE.format(package=PACKAGE_NAME)
    registry_timeout: float = REGISTRY_TIMEOUT_SECONDS

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str],
        args: Namespace | None = None,
        stdout: TextIO | None = None,
    ) -> "RuntimeConfig":
        """Build the configuration from environment and CLI flags.

        Args:
            environ: Environment mapping, usually ``os.environ``.
            args: Parsed arguments; ``no_color`` and ``verbose`` are honoured
                when present.
            stdout: Standard output stream; color is disabled when it is
                redirected away from a terminal.

        Returns:
            RuntimeConfig for this invocation.

        """
        color = color_enabled(environ, stdout)
        if getattr(args, "no_color", False):
            color = False

        level = DEFAULT_CONSOLE_LOG_LEVEL
        if getattr(args, "verbose", False):
            level = VERBOSE_CONSOLE_LOG_LEVEL

        return cls(color=color, console_log_level=level)
