"""Root conftest: local storage under tmp_path and a service with deterministic names."""

from __future__ import annotations

from datetime import date

import pytest

from imgserver.models.image import UploadRequest
from imgserver.services.image_service import ImageService
from imgserver.storage.local import LocalStorage

FIXED_TOKEN = "0f8fad5b-d9cb-469f-a165-70867728950e"
FIXED_DATE = date(2026, 2, 5)
URL_PREFIX = "http://1.2.3.4/images"

# 1x1 PNG
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x02\x00\x00\x00\x90wS\xde\x00\x00\x00\x0cIDAT\x08\xd7c\xf8\xcf\xc0"
    b"\x00\x00\x03\x01\x01\x00\x18\xdd\x8d\xb4\x00\x00\x00\x00IEND\xaeB`\x82"
)


def _upload_request(**overrides) -> UploadRequest:
    defaults = dict(
        project="shop",
        original_filename="photo.JPG",
        size_bytes=10,
        content=b"0123456789",
    )
    defaults.update(overrides)
    return UploadRequest(**defaults)


@pytest.fixture()
def upload_request():
    return _upload_request


@pytest.fixture()
def storage(tmp_path) -> LocalStorage:
    return LocalStorage(str(tmp_path / "images"))


@pytest.fixture()
def image_service(storage) -> ImageService:
    return ImageService(
        storage,
        url_prefix=URL_PREFIX,
        token_factory=lambda: FIXED_TOKEN,
        clock=lambda: FIXED_DATE,
    )
