"""Models for file storage: the configuration, the upload contract and the resource handle."""

from __future__ import annotations

import os
from io import BytesIO
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from fastapi import UploadFile


class StorageProperties(BaseModel):
    """The configuration of a file storage service."""

    model_config = ConfigDict(frozen=True)

    location: str

    @classmethod
    def from_settings(cls) -> StorageProperties:
        """Build the storage properties from the project settings."""
        from ...settings import settings

        return cls(location=settings.STORAGE_LOCATION)


@runtime_checkable
class Upload(Protocol):
    """A named byte stream that is being stored."""

    @property
    def original_filename(self) -> str | None:
        """The filename declared by the client."""
        ...

    def is_empty(self) -> bool:
        """Whether the upload has no content."""
        ...

    def get_input_stream(self) -> BinaryIO:
        """A binary stream with the content of the upload."""
        ...


class BytesUpload:
    """An in-memory upload."""

    def __init__(self, original_filename: str | None, content: bytes):
        self._original_filename = original_filename
        self.content = content

    @property
    def original_filename(self) -> str | None:
        return self._original_filename

    def is_empty(self) -> bool:
        return not self.content

    def get_input_stream(self) -> BinaryIO:
        return BytesIO(self.content)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._original_filename!r}, <{len(self.content)} bytes>)"


class UploadFileAdapter:
    """Adapts FastAPI's `UploadFile` to the `Upload` contract."""

    def __init__(self, upload_file: UploadFile):
        self.upload_file = upload_file

    @property
    def original_filename(self) -> str | None:
        return self.upload_file.filename

    def is_empty(self) -> bool:
        if self.upload_file.size is not None:
            return self.upload_file.size == 0

        # The size is unknown, so peek at the spooled file
        stream = self.upload_file.file
        position = stream.tell()
        is_empty = not stream.read(1)
        stream.seek(position)
        return is_empty

    def get_input_stream(self) -> BinaryIO:
        self.upload_file.file.seek(0)
        return self.upload_file.file


class FileResource:
    """A handle to a file on the local file system, returned for later streaming."""

    def __init__(self, path: Path):
        self.path = path
        # Raises `ValueError` if the path cannot be turned into a `file://` URI
        self.uri = path.as_uri()

    @property
    def filename(self) -> str:
        return self.path.name

    def exists(self) -> bool:
        """Check if the file exists."""
        return self.path.exists()

    def is_readable(self) -> bool:
        """Check if the file is a regular file the current process can read."""
        return self.path.is_file() and os.access(self.path, os.R_OK)

    def content_length(self) -> int:
        return self.path.stat().st_size

    def open(self) -> BinaryIO:
        """Open the file for binary reading. The caller is responsible for closing it."""
        return open(self.path, "rb")

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileResource):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.uri!r})"
