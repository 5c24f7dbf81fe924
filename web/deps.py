from __future__ import annotations

from fastapi import Request

from imgserver.services.image_service import ImageService


def get_image_service(request: Request) -> ImageService:
    """The service built once at startup by the app lifespan."""
    return request.app.state.image_service
