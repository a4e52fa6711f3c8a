"""
Pytest Configuration and Shared Fixtures

Every test gets its own storage root under `tmp_path`, and the API client is wired to it.
"""

from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from flatstore.app import app
from flatstore.routes.files import get_storage_service
from flatstore.toolkit.file_storage import FileSystemStorageService, StorageProperties


@pytest.fixture
def root_location(tmp_path: Path) -> Path:
    """The storage root. Not created by this fixture."""
    return tmp_path / "upload-dir"


@pytest.fixture
def storage_properties(root_location: Path) -> StorageProperties:
    return StorageProperties(location=str(root_location))


@pytest.fixture
def storage_service(storage_properties: StorageProperties) -> FileSystemStorageService:
    """An initialized storage service."""
    service = FileSystemStorageService(storage_properties)
    service.init()
    return service


@pytest.fixture
def client(storage_service: FileSystemStorageService) -> Generator[TestClient, None, None]:
    """API client that talks to the `storage_service` fixture."""
    app.dependency_overrides[get_storage_service] = lambda: storage_service
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
