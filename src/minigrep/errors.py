"""Exceptions raised by minigrep."""
from __future__ import annotations

from minigrep.config.constants import ERROR_FILE_READ, ERROR_NOT_ENOUGH_ARGUMENTS


class MinigrepError(RuntimeError):
    """Base class for errors that end a minigrep run."""


class MissingArgumentError(MinigrepError):
    """Raised when the query or file path argument is missing."""

    def __init__(self, message: str = ERROR_NOT_ENOUGH_ARGUMENTS) -> None:
        super().__init__(message)


class FileReadError(MinigrepError):
    """Raised when the target file cannot be opened, read, or decoded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(ERROR_FILE_READ.format(path=path, reason=reason))
        self.path = path
        self.reason = reason
