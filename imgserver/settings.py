from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict

from imgserver.constants import MAX_UPLOAD_SIZE


class StorageBackendType(str, Enum):
    LOCAL = "local"
    MINIO = "minio"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="IMGSERVER_", extra="ignore", frozen=True)

    upload_dir: str = "./images"
    url_prefix: str = "http://localhost/images"
    max_upload_size: int = MAX_UPLOAD_SIZE

    storage_backend: StorageBackendType = StorageBackendType.LOCAL

    minio_endpoint: str = ""
    minio_access_key: str = ""
    minio_secret_key: str = ""
    minio_bucket: str = "images"

    log_level: str = "INFO"
    log_json: bool = False

    host: str = "0.0.0.0"
    port: int = 8080


settings = Settings()
