"""Tests for brand logo files and the surrounding transaction."""

import io

import pytest

from plumbing.application.brand_service import BrandService
from plumbing.application.photo_service import PhotoUpload


def logo(filename: str = "grohe.png") -> PhotoUpload:
    return PhotoUpload(file=io.BytesIO(b"logo"), filename=filename, content_type="image/png")


def stored_name(public_url: str) -> str:
    return public_url.rsplit("/", 1)[-1]


class TestLogoRemoval:
    """Logo files are removed only when the deleting transaction commits."""

    @pytest.mark.asyncio
    async def test_logo_kept_when_delete_rolls_back(self, session, media_storage) -> None:
        service = BrandService(session, storage=media_storage)
        brand = await service.create_brand("Grohe", logo())
        await session.commit()

        await service.delete_brand(brand.id)
        assert media_storage.path_for(stored_name(brand.photo)).is_file()

        await session.rollback()

        assert media_storage.path_for(stored_name(brand.photo)).is_file()
        assert (await service.get_brand(brand.id)).name == "Grohe"

    @pytest.mark.asyncio
    async def test_logo_removed_on_commit(self, session, media_storage) -> None:
        service = BrandService(session, storage=media_storage)
        brand = await service.create_brand("Grohe", logo())
        await session.commit()

        await service.delete_brand(brand.id)
        await session.commit()

        assert list(media_storage.directory.iterdir()) == []

    @pytest.mark.asyncio
    async def test_replaced_logo_removed_on_commit(self, session, media_storage) -> None:
        """Only the new logo remains after an update commits."""
        service = BrandService(session, storage=media_storage)
        brand = await service.create_brand("Grohe", logo())
        await session.commit()

        updated = await service.update_brand(brand.id, "Grohe", logo())
        await session.commit()

        assert updated.photo != brand.photo
        assert [p.name for p in media_storage.directory.iterdir()] == [stored_name(updated.photo)]
