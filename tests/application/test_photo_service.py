"""Tests for photo helpers."""

import io

import pytest

from plumbing.application.photo_service import (
    PhotoUpload,
    photo_colors,
    photo_views,
    store_photos,
    validate_uploads,
)
from plumbing.domain.exceptions import InvalidImageError
from plumbing.infrastructure.models import Photo


def upload(filename: str, content_type: str = "image/png", **options) -> PhotoUpload:
    return PhotoUpload(file=io.BytesIO(b"img"), filename=filename, content_type=content_type, **options)


class TestUploads:
    """Tests for upload validation and storage."""

    def test_rejects_non_image(self) -> None:
        with pytest.raises(InvalidImageError) as exc_info:
            validate_uploads([upload("a.png"), upload("b.txt", "text/plain")])

        assert exc_info.value.details["filename"] == "b.txt"

    def test_rejects_missing_content_type(self) -> None:
        with pytest.raises(InvalidImageError):
            validate_uploads([upload("a.png", None)])

    def test_store_keeps_options(self, media_storage) -> None:
        """Stored photos keep their cover flag and color."""
        photos = store_photos([upload("a.png", is_main=True, hash_color="#FFF")], media_storage)

        assert len(photos) == 1
        assert photos[0].url.startswith("media/images/a_")
        assert photos[0].is_main is True
        assert photos[0].hash_color == "#FFF"


class TestPhotoViews:
    """Tests for photo_views and photo_colors."""

    def test_cover_first(self, media_storage) -> None:
        """The cover photo leads, the rest keep id order."""
        photos = [
            Photo(id=1, url="media/images/a.png", is_main=False, hash_color=""),
            Photo(id=2, url="media/images/b.png", is_main=True, hash_color=""),
            Photo(id=3, url="media/images/c.png", is_main=False, hash_color=""),
        ]

        views = photo_views(photos, media_storage)

        assert [v.id for v in views] == [2, 1, 3]
        assert views[0].url == "http://test/media/images/b.png"

    def test_distinct_colors(self) -> None:
        """Colors are distinct and blank colors are skipped."""
        photos = [
            Photo(id=1, url="a", is_main=False, hash_color="#FFF"),
            Photo(id=2, url="b", is_main=False, hash_color=""),
            Photo(id=3, url="c", is_main=False, hash_color="#000"),
            Photo(id=4, url="d", is_main=False, hash_color="#FFF"),
        ]

        assert [c.hash_color for c in photo_colors(photos)] == ["#FFF", "#000"]
