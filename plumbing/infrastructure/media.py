"""Media storage for uploaded images.

Images are written to the local media directory and referenced from
the database by a relative URL such as ``media/images/logo_1700000000.png``.
"""

import re
import shutil
import time
from pathlib import Path
from typing import BinaryIO

import structlog
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from plumbing.domain.exceptions import ImageNotFoundError
from plumbing.infrastructure.config import settings

logger = structlog.get_logger()

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9._-]")

_PENDING_REMOVALS = "pending_media_removals"


def sanitize_filename(filename: str, timestamp: int | None = None, counter: int = 0) -> str:
    """Build a storage-safe file name.

    Every character outside ``[a-zA-Z0-9._-]`` is replaced by ``_`` and
    a ``_<unix timestamp>`` suffix is inserted before the extension. A
    non-zero counter is appended after the timestamp as ``_<counter>``.

    Args:
        filename: Client-supplied file name.
        timestamp: Unix timestamp to use, defaults to now.
        counter: Disambiguates names created within the same second.

    Returns:
        Sanitized file name.
    """
    if timestamp is None:
        timestamp = int(time.time())

    suffix = f"_{timestamp}_{counter}" if counter else f"_{timestamp}"
    safe = _UNSAFE_CHARS.sub("_", Path(filename or "image").name) or "image"
    stem, dot, ext = safe.rpartition(".")
    if not dot or not stem:
        return f"{safe}{suffix}"
    return f"{stem}{suffix}.{ext}"


class MediaStorage:
    """Local filesystem storage for uploaded images.

    Example usage:
        storage = get_media_storage()
        url = storage.save(upload.file, upload.filename)
        public_url = storage.public_url(url)
    """

    def __init__(self, directory: str | Path, url_prefix: str, base_url: str) -> None:
        """Initialize storage.

        Args:
            directory: Directory files are written into.
            url_prefix: Relative URL prefix stored in the database.
            base_url: Public base URL of the service.
        """
        self.directory = Path(directory)
        self.url_prefix = url_prefix.strip("/")
        self.base_url = base_url.rstrip("/")

    def save(self, source: BinaryIO, filename: str) -> str:
        """Write an uploaded file under a name no other upload holds.

        Args:
            source: File object positioned at the start of the content.
            filename: Client-supplied file name.

        Returns:
            Relative URL of the stored file.
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        timestamp = int(time.time())
        counter = 0
        while True:
            name = sanitize_filename(filename, timestamp, counter)
            try:
                out = (self.directory / name).open("xb")
                break
            except FileExistsError:
                counter += 1

        with out:
            shutil.copyfileobj(source, out)

        logger.info("Image stored", filename=name, original=filename)
        return f"{self.url_prefix}/{name}"

    def path_for(self, name: str) -> Path:
        """Resolve a stored image name to a path.

        Args:
            name: File name as found in the URL.

        Returns:
            Path of the stored file.

        Raises:
            ImageNotFoundError: If the name escapes the media directory
                or no such file exists.
        """
        candidate = (self.directory / name).resolve()
        if candidate.parent != self.directory.resolve() or not candidate.is_file():
            raise ImageNotFoundError(name, field="name")
        return candidate

    def delete(self, url: str) -> None:
        """Remove a stored file by its relative URL, ignoring missing files."""
        name = url.rsplit("/", 1)[-1]
        path = self.directory / name
        if path.is_file():
            path.unlink()
            logger.info("Image removed", filename=name)

    def delete_after_commit(self, session: AsyncSession, url: str) -> None:
        """Remove a stored file once the session commits.

        The removal is dropped if the session rolls back, so rows that
        survive a failed transaction keep their files.
        """
        session.info.setdefault(_PENDING_REMOVALS, []).append((self, url))

    def public_url(self, url: str) -> str:
        """Build the absolute URL for a stored relative URL."""
        return f"{self.base_url}/{url.lstrip('/')}"


# ============================================================================
# Transaction Hooks
# ============================================================================


@event.listens_for(Session, "after_commit")
def _remove_committed_files(session: Session) -> None:
    for storage, url in session.info.pop(_PENDING_REMOVALS, []):
        storage.delete(url)


@event.listens_for(Session, "after_rollback")
def _forget_rolled_back_removals(session: Session) -> None:
    session.info.pop(_PENDING_REMOVALS, None)


# ============================================================================
# Singleton
# ============================================================================


_storage: MediaStorage | None = None


def get_media_storage() -> MediaStorage:
    """Get the media storage configured from settings."""
    global _storage
    if _storage is None:
        _storage = MediaStorage(
            directory=settings.media_dir,
            url_prefix=settings.media_url_prefix,
            base_url=settings.base_url,
        )
    return _storage


def reset_media_storage(storage: MediaStorage | None = None) -> None:
    """Replace or reset the media storage (for testing)."""
    global _storage
    _storage = storage
