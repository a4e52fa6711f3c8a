"""Storage service implementations."""

from ._base_storage_service import BaseFileStorageService
from .file_system_storage import FileSystemStorageService

__all__ = ["BaseFileStorageService", "FileSystemStorageService"]
