"""API routes for file handling."""

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from fastapi.responses import FileResponse

from ..api.schemas import ErrorDetail, StoredFile, StoredFileList, UploadResult
from ..exceptions import StorageError
from ..toolkit.file_storage import BaseFileStorageService, UploadFileAdapter, choose_storage_service
from ..toolkit.loguru_logging import logger

router = APIRouter(prefix="/files", tags=["files"])


# Dependencies
def get_storage_service() -> BaseFileStorageService:
    """Get the configured storage service."""
    return choose_storage_service()


@router.get("", response_model=StoredFileList)
def list_files(request: Request, storage_service: BaseFileStorageService = Depends(get_storage_service)):
    """List the stored files."""
    filenames = sorted(str(path) for path in storage_service.load_all())

    return StoredFileList(
        files=[
            StoredFile(filename=filename, download_url=str(request.url_for("serve_file", filename=filename)))
            for filename in filenames
        ]
    )


@router.get("/{filename}", responses={404: {"model": ErrorDetail}})
def serve_file(filename: str, storage_service: BaseFileStorageService = Depends(get_storage_service)):
    """Download a stored file."""
    resource = storage_service.load_as_resource(filename)

    return FileResponse(
        resource.path,
        filename=resource.filename,
        content_disposition_type="attachment",
    )


@router.post("", response_model=UploadResult, responses={400: {"model": ErrorDetail}})
def upload_file(
    file: UploadFile = File(...),
    storage_service: BaseFileStorageService = Depends(get_storage_service),
):
    """Upload a file."""
    try:
        storage_service.store(UploadFileAdapter(file))
    except StorageError as exception:
        logger.warning(f"Rejected upload of {file.filename}: {exception}")
        raise HTTPException(status_code=400, detail=str(exception)) from exception

    return UploadResult(filename=file.filename, message=f"You successfully uploaded {file.filename}!")
