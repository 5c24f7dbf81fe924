from unittest.mock import patch

from imgserver.errors import UnsupportedOperationError
from imgserver.services.image_service import ImageService
from tests.conftest import PNG_BYTES


class TestLifespan:
    def test_lifespan_builds_service(self, client, web_image_service):
        assert client.app.state.image_service is web_image_service

    def test_build_image_service_uses_settings(self, tmp_path):
        import web.app as app_module

        with patch.object(app_module, "settings") as mock_settings, patch.object(
            app_module, "get_storage"
        ) as mock_get_storage:
            mock_settings.url_prefix = "http://cdn/images"
            mock_settings.max_upload_size = 1024
            service = app_module.build_image_service()

        mock_get_storage.assert_called_once_with(mock_settings)
        assert isinstance(service, ImageService)
        assert service.url_prefix == "http://cdn/images"
        assert service.max_upload_size == 1024


class TestExceptionHandler:
    def test_unsupported_operation_returns_500(self, client, web_image_service, monkeypatch):
        def _unsupported(*args, **kwargs):
            raise UnsupportedOperationError("MinIO storage is not implemented yet.")

        monkeypatch.setattr(web_image_service.storage, "store", _unsupported)
        response = client.post(
            "/api/v1/images",
            params={"project": "shop"},
            files={"file": ("a.png", PNG_BYTES, "image/png")},
        )
        assert response.status_code == 500
        assert response.json()["error"] == "Unsupported Operation"

    def test_unhandled_exception_returns_500(self, monkeypatch, web_image_service):
        from starlette.testclient import TestClient

        import web.app as app_module

        monkeypatch.setattr(app_module, "build_image_service", lambda: web_image_service)

        def _crash(*args, **kwargs):
            raise RuntimeError("Unexpected disk crash")

        monkeypatch.setattr(web_image_service.storage, "load", _crash)

        with TestClient(app_module.app, raise_server_exceptions=False) as client:
            response = client.get("/api/v1/images/preview/shop/2026/02/05/a.png")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Internal Server Error"
        assert "disk crash" not in body["message"]
