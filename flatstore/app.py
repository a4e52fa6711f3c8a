"""The API server that exposes the file storage over HTTP."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .__version__ import __version__
from .exceptions import StorageError, StorageFileNotFoundError
from .routes.files import get_storage_service, router as files_router
from .settings import settings
from .toolkit.loguru_logging import configure_logging, logger

configure_logging(
    level=settings.LOG_LEVEL,
    serialize=not bool(settings.DEBUG),
    use_file_logs=settings.DO_USE_FILE_LOGS,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the storage root before serving requests."""
    storage_service = app.dependency_overrides.get(get_storage_service, get_storage_service)()

    if settings.DO_RESET_STORAGE_ON_STARTUP:
        logger.warning("Resetting the storage on startup")
        storage_service.delete_all()
        storage_service.init()
    elif not storage_service.load(".").exists():  # the storage root itself
        storage_service.init()

    yield


app = FastAPI(
    title="flatstore API",
    description="The API server that stores uploaded files in a single flat directory.",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(StorageFileNotFoundError)
async def storage_file_not_found_handler(request: Request, exception: StorageFileNotFoundError) -> JSONResponse:
    """Respond with `404 Not Found` when a stored file cannot be read."""
    return JSONResponse(status_code=404, content={"detail": exception.message})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exception: StorageError) -> JSONResponse:
    """Respond with `500 Internal Server Error` on any other storage failure."""
    return JSONResponse(status_code=500, content={"detail": exception.message})


app.include_router(files_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app)
