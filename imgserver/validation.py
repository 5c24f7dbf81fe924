from __future__ import annotations

import logging

from imgserver.constants import ALLOWED_EXTENSIONS, MAX_UPLOAD_SIZE, format_megabytes
from imgserver.errors import (
    EmptyFileError,
    MissingExtensionError,
    MissingFilenameError,
    SizeExceededError,
    UnsupportedExtensionError,
)
from imgserver.models.image import UploadRequest

logger = logging.getLogger(__name__)


def extract_extension(filename: str | None) -> str:
    """Return the lower-cased text after the last ``.`` of *filename*."""
    if not filename or "." not in filename:
        raise MissingExtensionError("File has no extension.")
    return filename.rsplit(".", 1)[1].lower()


def check_size(size_bytes: int, max_size: int = MAX_UPLOAD_SIZE, project: str | None = None) -> None:
    if size_bytes > max_size:
        logger.warning(
            "Rejected upload for project=%s: %d bytes exceeds limit of %d",
            project,
            size_bytes,
            max_size,
        )
        raise SizeExceededError(
            f"File is too large. Maximum upload size is {format_megabytes(max_size)}.",
            limit=max_size,
        )


def validate_upload(request: UploadRequest, max_size: int = MAX_UPLOAD_SIZE) -> str:
    """Check upload preconditions and return the validated extension.

    Only the declared metadata is inspected; the bytes themselves are not
    sniffed.
    """
    if not request.content:
        raise EmptyFileError("File is empty.")

    check_size(request.size_bytes, max_size, project=request.project)

    if request.original_filename is None or not request.original_filename.strip():
        raise MissingFilenameError("Filename is missing.")

    extension = extract_extension(request.original_filename)
    if extension not in ALLOWED_EXTENSIONS:
        raise UnsupportedExtensionError(
            f"Unsupported file type. Allowed extensions: {', '.join(ALLOWED_EXTENSIONS)}",
            extension=extension,
        )
    return extension
