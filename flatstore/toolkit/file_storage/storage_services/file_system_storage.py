"""File system storage implementation: a single flat directory with one file per upload."""

import os
import shutil
from os import DirEntry
from pathlib import Path
from typing import Iterator

from ....exceptions import StorageError, StorageFileNotFoundError
from ....toolkit.loguru_logging import logger
from ..models import FileResource, StorageProperties, Upload
from ._base_storage_service import BaseFileStorageService


class FileSystemStorageService(BaseFileStorageService):
    """Stores the files as direct children of the storage root."""

    def __init__(self, properties: StorageProperties):
        """Initialize the file system storage service.

        Args:
            properties: Storage properties. `properties.location` is the storage root, resolved against the current
                working directory if relative. It is never changed afterwards.
        """
        self.root_location = Path(os.path.abspath(properties.location))
        logger.debug(f"root_location: '{self.root_location}'")

    def _is_direct_child(self, path: Path) -> bool:
        """Check that the (normalized) path points to an entry right under the storage root."""
        return Path(os.path.abspath(path)).parent == self.root_location

    def init(self) -> None:
        logger.debug("init()")
        try:
            self.root_location.mkdir()
        except OSError as exception:
            logger.error(f"Could not initialize storage {self.root_location}: {exception}")
            raise StorageError("Could not initialize storage", exception) from exception

    def store(self, file: Upload) -> None:
        filename = file.original_filename
        logger.debug(f"store({filename!r})")

        if file.is_empty():
            logger.error(f"Failed to store empty file {filename}")
            raise StorageError(f"Failed to store empty file {filename}")

        if not filename:
            logger.error("Failed to store file without a filename")
            raise StorageError("Failed to store file without a filename")

        destination = self.load(filename)
        # Uploaded filenames are not trusted: `../` (or an absolute path) would land outside the storage root
        if not self._is_direct_child(destination):
            logger.error(f"Cannot store file {filename} outside of the storage root {self.root_location}")
            raise StorageError(f"Cannot store file {filename} outside of the storage root")

        is_created = False
        try:
            # "x" mode fails on an existing destination instead of overwriting it
            with open(destination, "xb") as destination_file:
                is_created = True
                shutil.copyfileobj(file.get_input_stream(), destination_file)
        except (OSError, ValueError) as exception:
            if is_created:
                destination.unlink(missing_ok=True)
            logger.error(f"Failed to store file {filename}: {exception}")
            raise StorageError(f"Failed to store file {filename}", exception) from exception

        logger.info(f"File stored successfully: {filename}")

    def load_all(self) -> Iterator[Path]:
        logger.debug("load_all()")
        # Start the scan right away, so that an unreadable root fails here and not on the first `next()`
        try:
            entries = os.scandir(self.root_location)
        except OSError as exception:
            logger.error(f"Failed to read stored files in {self.root_location}: {exception}")
            raise StorageError("Failed to read stored files", exception) from exception

        return self._iterate_entries(entries)

    def _iterate_entries(self, entries: Iterator[DirEntry]) -> Iterator[Path]:
        with entries:
            for entry in entries:
                yield Path(entry.path).relative_to(self.root_location)

    def load(self, filename: str) -> Path:
        logger.debug(f"load({filename!r})")
        return self.root_location / filename

    def load_as_resource(self, filename: str) -> FileResource:
        logger.debug(f"load_as_resource({filename!r})")
        try:
            path = self.load(filename)
            if not self._is_direct_child(path):
                logger.error(f"Could not read file outside of the storage root: {filename}")
                raise StorageFileNotFoundError(f"Could not read file: {filename}")

            resource = FileResource(path)
            if resource.exists() and resource.is_readable():
                return resource
        except (OSError, ValueError) as exception:
            # e.g. an embedded null byte, which cannot make a valid file path
            logger.error(f"Could not read file: {filename}: {exception}")
            raise StorageFileNotFoundError(f"Could not read file: {filename}", exception) from exception

        logger.error(f"Could not read file: {filename}")
        raise StorageFileNotFoundError(f"Could not read file: {filename}")

    def delete_all(self) -> bool:
        logger.debug("delete_all()")
        try:
            shutil.rmtree(self.root_location)
        except FileNotFoundError:
            logger.debug(f"Nothing to delete, {self.root_location} does not exist")
            return False
        except OSError as exception:
            logger.warning(f"Could not delete everything in {self.root_location}: {exception}")
            return False

        logger.info(f"Deleted the storage root {self.root_location}")
        return True
