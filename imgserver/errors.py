"""Error types raised by validation and the storage backends.

Every failure the core can detect locally has its own type so the HTTP layer
can map it to a status code without inspecting messages.
"""

from __future__ import annotations


class ImageServerError(Exception):
    pass


class InvalidFileError(ImageServerError):
    """The upload was rejected before any I/O happened."""


class EmptyFileError(InvalidFileError):
    pass


class SizeExceededError(InvalidFileError):
    def __init__(self, message: str, limit: int) -> None:
        super().__init__(message)
        self.limit = limit


class MissingFilenameError(InvalidFileError):
    pass


class MissingExtensionError(InvalidFileError):
    pass


class UnsupportedExtensionError(InvalidFileError):
    def __init__(self, message: str, extension: str) -> None:
        super().__init__(message)
        self.extension = extension


class InvalidProjectError(InvalidFileError):
    pass


class ImageNotFoundError(ImageServerError):
    pass


class StorageWriteError(ImageServerError):
    pass


class UnsupportedOperationError(ImageServerError):
    pass
