"""Tests for dtop exception classes."""

from dtop.exceptions import DtopError, PromptAbortedError, RegistryError


def test_error_without_target():
    assert str(DtopError("boom")) == "Operation failed: boom"


def test_registry_error_with_target():
    error = RegistryError("timed out", target="dtop")
    assert str(error) == "Version check failed for 'dtop': timed out"
    assert error.message == "timed out"
    assert isinstance(error, DtopError)


def test_prompt_aborted_error_prefix():
    assert str(PromptAbortedError("input closed")) == (
        "Prompt aborted: input closed"
    )
