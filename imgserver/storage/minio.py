from __future__ import annotations

import logging

from imgserver.errors import UnsupportedOperationError
from imgserver.models.image import StoredImage
from imgserver.storage.base import StorageBackend

logger = logging.getLogger(__name__)

_NOT_IMPLEMENTED = "MinIO storage is not implemented yet."


class MinioStorage(StorageBackend):
    """Object-store backend placeholder.

    Objects would live at ``<bucket>/<project>/<YYYY>/<MM>/<DD>/<stored_name>``
    so the public URL layout stays the same as with local storage.
    """

    def __init__(
        self,
        endpoint: str,
        access_key: str,
        secret_key: str,
        bucket: str,
    ) -> None:
        self.endpoint = endpoint
        self.access_key = access_key
        self.secret_key = secret_key
        self.bucket = bucket

    def store(self, project: str, date_path: str, stored_name: str, content: bytes) -> None:
        logger.error("store() called on unimplemented MinIO backend bucket=%s", self.bucket)
        raise UnsupportedOperationError(_NOT_IMPLEMENTED)

    def load(self, project: str, date_path: str, filename: str) -> StoredImage:
        logger.error("load() called on unimplemented MinIO backend bucket=%s", self.bucket)
        raise UnsupportedOperationError(_NOT_IMPLEMENTED)

    def probe_content_type(self, resource: StoredImage) -> str | None:
        raise UnsupportedOperationError(_NOT_IMPLEMENTED)
