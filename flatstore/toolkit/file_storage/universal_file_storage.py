"""Picks the file storage service the project is configured with."""

from typing import Type

from ...enums import StoragesIDs
from ...settings import settings
from .models import StorageProperties
from .storage_services import BaseFileStorageService, FileSystemStorageService

STORAGES_IDS_TO_SERVICES: dict[StoragesIDs, Type[BaseFileStorageService]] = {
    StoragesIDs.FILE_SYSTEM: FileSystemStorageService,
}


def choose_storage_service(
    default: StoragesIDs = StoragesIDs.FILE_SYSTEM, properties: StorageProperties | None = None
) -> BaseFileStorageService:
    """Choose the storage service to use based on the settings, falling back to the default value."""
    storage_id: StoragesIDs = StoragesIDs(settings.STORAGE_SERVICE_ID) if settings.STORAGE_SERVICE_ID else default

    storage_service_class: Type[BaseFileStorageService] = STORAGES_IDS_TO_SERVICES[storage_id]
    return storage_service_class(properties or StorageProperties.from_settings())
