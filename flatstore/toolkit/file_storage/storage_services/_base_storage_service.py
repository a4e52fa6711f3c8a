"""Base storage service for file handling."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

from ..models import FileResource, Upload


class BaseFileStorageService(ABC):
    """Base class for file storage services."""

    @abstractmethod
    def init(self) -> None:
        """Creates the storage root.

        Raises:
            StorageError: If the root cannot be created, including when it already exists
        """
        raise NotImplementedError

    @abstractmethod
    def store(self, file: Upload) -> None:
        """Stores an upload under its original filename.

        Args:
            file: The upload to store

        Raises:
            StorageError: If the upload is empty or cannot be copied into the storage
        """
        raise NotImplementedError

    @abstractmethod
    def load_all(self) -> Iterator[Path]:
        """Lists the stored files.

        Returns:
            Iterator[Path]: A one-shot iterator of paths relative to the storage root. Exhaust it or `close()` it.

        Raises:
            StorageError: If the storage cannot be scanned
        """
        raise NotImplementedError

    @abstractmethod
    def load(self, filename: str) -> Path:
        """Resolves a filename to its path in the storage. Does not check that the file exists.

        Args:
            filename: Name of the stored file

        Returns:
            Path: Absolute path of the file
        """
        raise NotImplementedError

    @abstractmethod
    def load_as_resource(self, filename: str) -> FileResource:
        """Loads a stored file as a readable resource.

        Args:
            filename: Name of the stored file

        Returns:
            FileResource: Handle to the readable file

        Raises:
            StorageFileNotFoundError: If the file does not exist or cannot be read
        """
        raise NotImplementedError

    @abstractmethod
    def delete_all(self) -> bool:
        """Deletes the storage root and everything in it.

        Returns:
            bool: True if anything was deleted, False otherwise
        """
        raise NotImplementedError
