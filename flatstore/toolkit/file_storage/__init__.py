"""File storage module for handling file uploads and downloads."""

from .models import BytesUpload, FileResource, StorageProperties, Upload, UploadFileAdapter
from .storage_services import BaseFileStorageService, FileSystemStorageService
from .universal_file_storage import choose_storage_service

__all__ = [
    "BaseFileStorageService",
    "FileSystemStorageService",
    "BytesUpload",
    "FileResource",
    "StorageProperties",
    "Upload",
    "UploadFileAdapter",
    "choose_storage_service",
]
