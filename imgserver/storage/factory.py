from __future__ import annotations

import logging

from imgserver.settings import Settings, StorageBackendType, settings
from imgserver.storage.base import StorageBackend

logger = logging.getLogger(__name__)


def get_storage(config: Settings | None = None) -> StorageBackend:
    config = config or settings
    backend = config.storage_backend

    if backend == StorageBackendType.LOCAL:
        from imgserver.storage.local import LocalStorage

        logger.info("Using storage backend: local dir=%s", config.upload_dir)
        return LocalStorage(config.upload_dir)

    if backend == StorageBackendType.MINIO:
        from imgserver.storage.minio import MinioStorage

        logger.info("Using storage backend: minio bucket=%s", config.minio_bucket)
        return MinioStorage(
            endpoint=config.minio_endpoint,
            access_key=config.minio_access_key,
            secret_key=config.minio_secret_key,
            bucket=config.minio_bucket,
        )

    raise ValueError(f"Unsupported storage backend: {backend}")
