"""Tests for version normalization and comparison."""

import pytest

from dtop.core.version import is_newer, normalize_version


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1.2.3", "1.2.3"),
        ("v1.2.3", "1.2.3"),
        ("1.2.3-beta", "1.2.3b0"),
        ("1.2.3-alpha2", "1.2.3a2"),
        ("v2.0.0-rc.1", "2.0.0rc1"),
        ("dev", "dev"),
    ],
)
def test_normalize_version(raw, expected):
    assert normalize_version(raw) == expected


def test_is_newer_true_for_higher_candidate():
    assert is_newer("1.2.0", "2.0.0") is True


def test_is_newer_false_for_same_or_older():
    assert is_newer("2.0.0", "2.0.0") is False
    assert is_newer("2.0.1", "2.0.0") is False


def test_is_newer_prerelease_is_older_than_release():
    assert is_newer("2.0.0-beta", "2.0.0") is True


def test_is_newer_unknown_for_unparsable_versions():
    assert is_newer("dev", "2.0.0") is None
    assert is_newer("1.0.0", "latest") is None
