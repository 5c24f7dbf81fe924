from __future__ import annotations

import re
import uuid
from collections.abc import Callable
from datetime import date

from imgserver.constants import DATE_PATH_FORMAT
from imgserver.errors import InvalidProjectError
from imgserver.models.image import StorageKey

_PROJECT_RE = re.compile(r"^[A-Za-z0-9._-]+$")


def random_token() -> str:
    return str(uuid.uuid4())


def validate_project(project: str | None) -> str:
    if not project or project in (".", "..") or not _PROJECT_RE.match(project):
        raise InvalidProjectError(f"Invalid project identifier: {project!r}")
    return project


def format_date_path(day: date) -> str:
    return day.strftime(DATE_PATH_FORMAT)


def derive_key(
    project: str,
    extension: str,
    today: date | None = None,
    token_factory: Callable[[], str] = random_token,
) -> StorageKey:
    """Build the key for a new upload.

    The stored name is never taken from the client; uniqueness rests on the
    randomness of the token and is not checked against storage.
    """
    day = today or date.today()
    return StorageKey(
        project=validate_project(project),
        date_path=format_date_path(day),
        stored_name=f"{token_factory()}.{extension}",
    )


def compose_url(prefix: str, key: StorageKey) -> str:
    return f"{prefix.rstrip('/')}/{key.path}"
