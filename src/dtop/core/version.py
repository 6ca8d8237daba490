"""Version comparison helpers for the version command."""

import re

from packaging.version import InvalidVersion, Version

_PRERELEASE_MAP = {
    "alpha": "a",
    "beta": "b",
    "rc": "rc",
}

_PRERELEASE_RE = re.compile(
    r"""
    ^
    (?P<base>\d+\.\d+\.\d+)
    (?:-
        (?P<label>alpha|beta|rc)
        \.?(?P<num>\d*)?
    )?
    $
    """,
    re.VERBOSE,
)


def normalize_version(v: str) -> str:
    """Normalize semver-like versions to PEP 440.

    >>> normalize_version("v2.0.0-beta.1")
    '2.0.0b1'
    """
    v = v.strip().lstrip("v")

    match = _PRERELEASE_RE.match(v)
    if not match:
        return v

    base = match.group("base")
    label = match.group("label")
    num = match.group("num") or "0"

    if not label:
        return base

    return f"{base}{_PRERELEASE_MAP[label]}{num}"


def is_newer(current_version: str, candidate_version: str) -> bool | None:
    """Return whether candidate is newer than current.

    Returns None when either version cannot be parsed, for example the
    ``"dev"`` fallback used by uninstalled checkouts.
    """
    try:
        current = Version(normalize_version(current_version))
        candidate = Version(normalize_version(candidate_version))
    except InvalidVersion:
        return None

    return candidate > current
