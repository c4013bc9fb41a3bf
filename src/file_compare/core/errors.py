"""Exceptions raised by the comparison core."""

from __future__ import annotations


class FileCompareError(Exception):
    """Base class for all file-compare errors.

    Attributes:
        message: Human-readable description of the error.
        original_error: The wrapped exception that caused this error, if any.
    """

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class MissingInputError(FileCompareError):
    """Raised when an input file is absent before any adapter runs."""


class AdapterError(FileCompareError):
    """Raised when an adapter cannot normalize a file and has no fallback.

    Attributes:
        file_path: Path of the file that failed to parse.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error=original_error)
        self.file_path = file_path
