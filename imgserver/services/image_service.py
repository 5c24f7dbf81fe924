from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from imgserver.constants import DEFAULT_CONTENT_TYPE, MAX_UPLOAD_SIZE
from imgserver.keys import compose_url, derive_key, random_token
from imgserver.models.image import StoredImage, UploadRequest, UploadResult
from imgserver.storage.base import StorageBackend
from imgserver.validation import validate_upload

logger = logging.getLogger(__name__)


class ImageService:
    def __init__(
        self,
        storage: StorageBackend,
        url_prefix: str,
        max_upload_size: int = MAX_UPLOAD_SIZE,
        token_factory: Callable[[], str] = random_token,
        clock: Callable[[], date] | None = None,
    ) -> None:
        self.storage = storage
        self.url_prefix = url_prefix
        self.max_upload_size = max_upload_size
        self.token_factory = token_factory
        self.clock = clock or date.today

    def upload_image(self, request: UploadRequest) -> UploadResult:
        """Validate, store and return the public URL of an uploaded image."""
        extension = validate_upload(request, self.max_upload_size)
        key = derive_key(request.project, extension, today=self.clock(), token_factory=self.token_factory)

        self.storage.store(key.project, key.date_path, key.stored_name, request.content)

        access_url = compose_url(self.url_prefix, key)
        logger.info(
            "Stored image project=%s original=%s stored=%s size=%d",
            key.project,
            request.original_filename,
            key.path,
            request.size_bytes,
        )
        return UploadResult(stored_name=key.stored_name, access_url=access_url)

    def load_image(self, project: str, year: str, month: str, day: str, filename: str) -> StoredImage:
        date_path = f"{year}/{month}/{day}"
        resource = self.storage.load(project, date_path, filename)
        logger.info("Loaded image project=%s path=%s/%s", project, date_path, filename)
        return resource

    def get_content_type(self, resource: StoredImage) -> str:
        content_type = self.storage.probe_content_type(resource)
        if content_type is None:
            logger.warning("Could not detect content type for %s, using %s", resource.filename, DEFAULT_CONTENT_TYPE)
            return DEFAULT_CONTENT_TYPE
        return content_type
