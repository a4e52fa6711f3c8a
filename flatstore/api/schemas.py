"""The Schemas used by the `flatstore` API."""

from pydantic import BaseModel


class StoredFile(BaseModel):
    """The model for a stored file."""

    filename: str
    download_url: str


class StoredFileList(BaseModel):
    """The model for the list of stored files."""

    files: list[StoredFile]


class UploadResult(BaseModel):
    """The model for the result of an upload."""

    filename: str
    message: str


class ErrorDetail(BaseModel):
    """The model for an error response."""

    detail: str
