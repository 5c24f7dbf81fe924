from abc import ABC, abstractmethod

from imgserver.models.image import StoredImage


class StorageBackend(ABC):
    @abstractmethod
    def store(self, project: str, date_path: str, stored_name: str, content: bytes) -> None:
        """Persist content at ``project/date_path/stored_name``.

        Raises ``StorageWriteError`` on any I/O failure. Storing the same key
        twice overwrites.
        """
        ...

    @abstractmethod
    def load(self, project: str, date_path: str, filename: str) -> StoredImage:
        """Return a handle to a stored image.

        Raises ``ImageNotFoundError`` when the image is missing, unreadable,
        not an image, or addressed outside the storage root.
        """
        ...

    @abstractmethod
    def probe_content_type(self, resource: StoredImage) -> str | None:
        """Best-effort media type of *resource*; ``None`` when unknown."""
        ...
