from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, Query, Request, UploadFile
from fastapi.responses import FileResponse
from starlette.concurrency import run_in_threadpool

from imgserver.models.image import UploadRequest
from imgserver.services.image_service import ImageService
from imgserver.validation import check_size
from web.deps import get_image_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/images")


@router.post("")
async def upload(
    project: str = Query(...),
    file: UploadFile = File(...),
    image_service: ImageService = Depends(get_image_service),
):
    logger.info("POST /api/v1/images project=%s filename=%s", project, file.filename)
    # The parser has already spooled the part; refuse it before pulling it into memory.
    if file.size:
        check_size(file.size, image_service.max_upload_size, project=project)
    content = await file.read()
    request = UploadRequest(
        project=project,
        original_filename=file.filename,
        size_bytes=file.size if file.size is not None else len(content),
        content=content,
    )
    result = await run_in_threadpool(image_service.upload_image, request)
    logger.info("Image uploaded: %s", result.access_url)
    return {"file_name": result.stored_name, "url": result.access_url}


async def _serve(
    image_service: ImageService,
    disposition: str,
    project: str,
    year: str,
    month: str,
    day: str,
    filename: str,
) -> FileResponse:
    resource = await run_in_threadpool(image_service.load_image, project, year, month, day, filename)
    content_type = image_service.get_content_type(resource)
    return FileResponse(
        resource.path,
        media_type=content_type,
        filename=filename,
        content_disposition_type=disposition,
    )


@router.get("/preview/{project}/{year}/{month}/{day}/{filename}")
async def preview(
    request: Request,
    project: str,
    year: str,
    month: str,
    day: str,
    filename: str,
    image_service: ImageService = Depends(get_image_service),
):
    logger.info("GET %s (preview)", request.url.path)
    return await _serve(image_service, "inline", project, year, month, day, filename)


@router.get("/download/{project}/{year}/{month}/{day}/{filename}")
async def download(
    request: Request,
    project: str,
    year: str,
    month: str,
    day: str,
    filename: str,
    image_service: ImageService = Depends(get_image_service),
):
    logger.info("GET %s (download)", request.url.path)
    return await _serve(image_service, "attachment", project, year, month, day, filename)
