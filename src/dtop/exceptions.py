"""Exception classes for dtop operations."""


class DtopError(Exception):
    """Base exception for dtop operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class RegistryError(DtopError):
    """Raised when the package registry lookup fails."""

    error_prefix = "Version check failed"


class PromptAbortedError(DtopError):
    """Raised when input is closed while a prompt is waiting."""

    error_prefix = "Prompt aborted"
