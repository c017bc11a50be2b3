"""Photo handling shared by collections and items.

Validates and stores uploaded photos and converts stored photos into
the views returned to clients.
"""

from dataclasses import dataclass
from typing import BinaryIO

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.domain.exceptions import InvalidImageError
from plumbing.infrastructure.media import MediaStorage, get_media_storage
from plumbing.infrastructure.models import Photo

logger = structlog.get_logger()


@dataclass
class PhotoUpload:
    """Uploaded photo with its per-file form options."""

    file: BinaryIO
    filename: str
    content_type: str | None
    is_main: bool = False
    hash_color: str = ""


@dataclass
class PhotoDTO:
    """Photo view with an absolute URL."""

    id: int
    url: str
    is_main: bool
    hash_color: str


@dataclass
class ColorTagDTO:
    """Color offered for a collection or item."""

    hash_color: str


def validate_uploads(uploads: list[PhotoUpload]) -> None:
    """Check that every upload is an image.

    Raises:
        InvalidImageError: On the first upload with a non-image content type.
    """
    for upload in uploads:
        if not (upload.content_type or "").startswith("image/"):
            raise InvalidImageError(upload.filename, upload.content_type)


def store_photos(
    uploads: list[PhotoUpload],
    storage: MediaStorage | None = None,
) -> list[Photo]:
    """Validate and write uploaded photos.

    Nothing is written when any upload is rejected.

    Args:
        uploads: Uploaded photos.
        storage: Target storage, defaults to the configured one.

    Returns:
        Unsaved photo records pointing at the stored files.
    """
    validate_uploads(uploads)
    storage = storage or get_media_storage()

    photos = []
    for upload in uploads:
        url = storage.save(upload.file, upload.filename)
        photos.append(Photo(url=url, is_main=upload.is_main, hash_color=upload.hash_color))
    return photos


def remove_files(
    session: AsyncSession,
    urls: list[str],
    storage: MediaStorage | None = None,
) -> None:
    """Remove stored files of deleted photos once the session commits."""
    storage = storage or get_media_storage()
    for url in urls:
        storage.delete_after_commit(session, url)


def photo_views(photos: list[Photo], storage: MediaStorage | None = None) -> list[PhotoDTO]:
    """Build photo views, cover photos first."""
    storage = storage or get_media_storage()
    ordered = sorted(photos, key=lambda p: (not p.is_main, p.id or 0))
    return [
        PhotoDTO(
            id=photo.id,
            url=storage.public_url(photo.url),
            is_main=photo.is_main,
            hash_color=photo.hash_color,
        )
        for photo in ordered
    ]


def photo_colors(photos: list[Photo]) -> list[ColorTagDTO]:
    """Derive the distinct colors shown on a set of photos."""
    seen: list[str] = []
    for photo in sorted(photos, key=lambda p: p.id or 0):
        if photo.hash_color and photo.hash_color not in seen:
            seen.append(photo.hash_color)
    return [ColorTagDTO(hash_color=color) for color in seen]
