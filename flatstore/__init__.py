"""The `flatstore` service: uploaded files kept in a single flat directory."""

from .exceptions import StorageError, StorageFileNotFoundError
from .toolkit.file_storage import (
    BaseFileStorageService,
    BytesUpload,
    FileResource,
    FileSystemStorageService,
    StorageProperties,
    Upload,
)

__all__ = [
    "BaseFileStorageService",
    "FileSystemStorageService",
    "StorageProperties",
    "Upload",
    "BytesUpload",
    "FileResource",
    "StorageError",
    "StorageFileNotFoundError",
]
