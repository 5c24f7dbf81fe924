from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class UploadRequest(BaseModel):
    project: str
    original_filename: str | None = None
    size_bytes: int = 0
    content: bytes | None = None


class StorageKey(BaseModel):
    model_config = ConfigDict(frozen=True)

    project: str
    date_path: str
    stored_name: str

    @property
    def path(self) -> str:
        """Relative object path: ``project/YYYY/MM/DD/stored_name``."""
        return f"{self.project}/{self.date_path}/{self.stored_name}"


class UploadResult(BaseModel):
    stored_name: str
    access_url: str


class StoredImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: StorageKey
    path: Path

    @property
    def filename(self) -> str:
        return self.key.stored_name

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()
