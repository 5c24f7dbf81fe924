import logging
import mimetypes
import os
import tempfile
from pathlib import Path

from imgserver.errors import ImageNotFoundError, StorageWriteError
from imgserver.models.image import StorageKey, StoredImage
from imgserver.storage.base import StorageBackend

logger = logging.getLogger(__name__)

# Not registered by every platform's mime.types.
mimetypes.add_type("image/webp", ".webp")
mimetypes.add_type("image/bmp", ".bmp")


def _is_unsafe(*parts: str) -> bool:
    for part in parts:
        if "\x00" in part:
            return True
        for segment in part.replace("\\", "/").split("/"):
            if segment == "..":
                return True
    return False


class LocalStorage(StorageBackend):
    def __init__(self, base_dir: str) -> None:
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self.root = self.base_dir.resolve()

    def _resolve(self, project: str, date_path: str, filename: str) -> Path | None:
        if _is_unsafe(project, date_path, filename):
            return None
        try:
            path = (self.root / project / date_path / filename).resolve()
        except (OSError, ValueError):
            return None
        if not path.is_relative_to(self.root):
            return None
        return path

    def store(self, project: str, date_path: str, stored_name: str, content: bytes) -> None:
        target = self._resolve(project, date_path, stored_name)
        if target is None:
            raise StorageWriteError(f"Invalid storage path: {project}/{date_path}/{stored_name}")

        folder = target.parent
        try:
            if not folder.exists():
                folder.mkdir(parents=True, exist_ok=True)
                logger.info("Created directory %s", folder)
        except OSError as e:
            logger.error("Failed to create directory %s: %s", folder, e)
            raise StorageWriteError("Could not create image directory.") from e

        try:
            fd, tmp_name = tempfile.mkstemp(dir=folder, prefix=".upload-", suffix=".part")
        except OSError as e:
            logger.error("Failed to create temp file in %s: %s", folder, e)
            raise StorageWriteError("Could not save image.") from e

        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(content)
            # mkstemp creates files as 0600.
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, target)
        except OSError as e:
            logger.error("Failed to write %s: %s", target, e)
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise StorageWriteError("Could not save image.") from e

        logger.debug("Saved %s (%d bytes)", target, len(content))

    def load(self, project: str, date_path: str, filename: str) -> StoredImage:
        path = self._resolve(project, date_path, filename)
        if path is None:
            logger.warning("Rejected unsafe storage path: %s/%s/%s", project, date_path, filename)
            raise ImageNotFoundError(f"Image not found: {filename}")

        if not path.is_file() or not os.access(path, os.R_OK):
            logger.error("Image missing or unreadable: %s", path)
            raise ImageNotFoundError(f"Image not found: {filename}")

        resource = StoredImage(
            key=StorageKey(project=project, date_path=date_path, stored_name=filename),
            path=path,
        )
        content_type = self.probe_content_type(resource)
        if content_type is None or not content_type.startswith("image/"):
            logger.error("Not an image file: %s (content_type=%s)", path, content_type)
            raise ImageNotFoundError(f"Image not found: {filename}")

        logger.debug("Loaded %s", path)
        return resource

    def probe_content_type(self, resource: StoredImage) -> str | None:
        content_type, _ = mimetypes.guess_type(resource.path.name)
        return content_type
