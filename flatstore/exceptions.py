"""The module that contains the exceptions for the storage service."""

from __future__ import annotations


class StorageError(RuntimeError):
    """The exception that is raised when the storage cannot complete an operation."""

    def __init__(self, message: str, cause: BaseException | None = None):
        """Initialize the exception with a human-readable message and the underlying cause, if any."""
        super().__init__(message)

        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class StorageFileNotFoundError(StorageError):
    """The exception that is raised when a stored file cannot be found or read."""

    pass
