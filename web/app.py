from __future__ import annotations

import logging
import traceback
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette.responses import JSONResponse

from imgserver.errors import (
    ImageNotFoundError,
    InvalidFileError,
    SizeExceededError,
    StorageWriteError,
    UnsupportedOperationError,
)
from imgserver.logging import configure_logging
from imgserver.services.image_service import ImageService
from imgserver.settings import settings
from imgserver.storage.factory import get_storage
from web.routes.image import router as image_router

logger = logging.getLogger(__name__)


def build_image_service() -> ImageService:
    return ImageService(
        get_storage(settings),
        url_prefix=settings.url_prefix,
        max_upload_size=settings.max_upload_size,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    app.state.image_service = build_image_service()
    logger.info("Application started")
    yield


app = FastAPI(docs_url=None, redoc_url=None, lifespan=lifespan)
app.include_router(image_router)


def _error_response(request: Request, status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        {
            "status": status_code,
            "error": error,
            "message": message,
            "path": request.url.path,
        },
        status_code=status_code,
    )


@app.exception_handler(SizeExceededError)
async def size_exceeded_handler(request: Request, exc: SizeExceededError):
    logger.warning("File size exceeded on %s: %s", request.url.path, exc)
    return _error_response(request, 413, "File Size Exceeded", str(exc))


@app.exception_handler(InvalidFileError)
async def invalid_file_handler(request: Request, exc: InvalidFileError):
    logger.warning("Invalid file on %s: %s", request.url.path, exc)
    return _error_response(request, 400, "Invalid File", str(exc))


@app.exception_handler(ImageNotFoundError)
async def not_found_handler(request: Request, exc: ImageNotFoundError):
    logger.warning("Image not found on %s: %s", request.url.path, exc)
    return _error_response(request, 404, "Image Not Found", str(exc))


@app.exception_handler(StorageWriteError)
async def storage_write_handler(request: Request, exc: StorageWriteError):
    logger.error("Image upload failed on %s: %s", request.url.path, exc)
    return _error_response(request, 500, "Image Upload Failed", str(exc))


@app.exception_handler(UnsupportedOperationError)
async def unsupported_operation_handler(request: Request, exc: UnsupportedOperationError):
    logger.error("Unsupported storage operation on %s: %s", request.url.path, exc)
    return _error_response(request, 500, "Unsupported Operation", str(exc))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled exception on %s %s:\n%s",
        request.method,
        request.url.path,
        traceback.format_exc(),
    )
    return _error_response(
        request,
        500,
        "Internal Server Error",
        "An internal server error occurred.",
    )
