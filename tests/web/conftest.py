"""Web test fixtures: TestClient backed by local storage under tmp_path."""

from __future__ import annotations

from datetime import date

import pytest

from imgserver.services.image_service import ImageService
from imgserver.storage.local import LocalStorage
from tests.conftest import FIXED_TOKEN, URL_PREFIX


@pytest.fixture()
def upload_root(tmp_path):
    return tmp_path / "images"


@pytest.fixture()
def web_image_service(upload_root) -> ImageService:
    return ImageService(
        LocalStorage(str(upload_root)),
        url_prefix=URL_PREFIX,
        token_factory=lambda: FIXED_TOKEN,
        clock=lambda: date(2026, 2, 5),
    )


@pytest.fixture()
def client(monkeypatch, web_image_service):
    from starlette.testclient import TestClient

    import web.app as app_module

    monkeypatch.setattr(app_module, "build_image_service", lambda: web_image_service)

    with TestClient(app_module.app) as test_client:
        yield test_client
