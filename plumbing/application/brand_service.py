"""Brand application service."""

from dataclasses import dataclass

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.application.photo_service import PhotoUpload, validate_uploads
from plumbing.domain.exceptions import BrandExistsError, BrandNotFoundError
from plumbing.infrastructure.media import MediaStorage, get_media_storage
from plumbing.infrastructure.models import Brand
from plumbing.repositories.brand import BrandRepository

logger = structlog.get_logger()


@dataclass
class BrandDTO:
    """Brand with the public URL of its logo."""

    id: int
    name: str
    photo: str


class BrandService:
    """Application service for partner brands.

    Example usage:
        service = BrandService(session)
        brand = await service.create_brand("Grohe", upload)
    """

    def __init__(
        self,
        session: AsyncSession,
        request_id: str | None = None,
        storage: MediaStorage | None = None,
    ) -> None:
        """Initialize service.

        Args:
            session: Database session.
            request_id: Request ID for correlation.
            storage: Logo storage, defaults to the configured one.
        """
        self.session = session
        self.brand_repo = BrandRepository(session)
        self.storage = storage or get_media_storage()
        self.request_id = request_id

    async def create_brand(self, name: str, logo: PhotoUpload) -> BrandDTO:
        """Create a brand with its logo.

        Raises:
            BrandExistsError: If the name is taken.
            InvalidImageError: If the logo is not an image.
        """
        if await self.brand_repo.name_exists(name):
            raise BrandExistsError(name)
        validate_uploads([logo])

        url = self.storage.save(logo.file, logo.filename)
        brand = await self.brand_repo.save(Brand(name=name, url=url))

        logger.info("Brand created", brand_id=brand.id, name=name, request_id=self.request_id)
        return self._to_dto(brand)

    async def list_brands(self) -> list[BrandDTO]:
        """List every brand."""
        return [self._to_dto(brand) for brand in await self.brand_repo.find_all()]

    async def get_brand(self, brand_id: int) -> BrandDTO:
        """Get a brand.

        Raises:
            BrandNotFoundError: If the brand does not exist.
        """
        return self._to_dto(await self._require(brand_id))

    async def update_brand(
        self,
        brand_id: int,
        name: str,
        logo: PhotoUpload | None = None,
    ) -> BrandDTO:
        """Rename a brand and optionally replace its logo.

        Raises:
            BrandNotFoundError: If the brand does not exist.
            BrandExistsError: If another brand uses the name.
        """
        brand = await self._require(brand_id)
        if await self.brand_repo.name_exists(name, exclude_id=brand_id):
            raise BrandExistsError(name)

        brand.name = name
        if logo is not None:
            validate_uploads([logo])
            old_url = brand.url
            brand.url = self.storage.save(logo.file, logo.filename)
            self.storage.delete_after_commit(self.session, old_url)

        await self.brand_repo.save(brand)

        logger.info(
            "Brand updated",
            brand_id=brand_id,
            logo_replaced=logo is not None,
            request_id=self.request_id,
        )
        return self._to_dto(brand)

    async def delete_brand(self, brand_id: int) -> None:
        """Delete a brand; its logo file goes once the transaction commits.

        Raises:
            BrandNotFoundError: If the brand does not exist.
        """
        brand = await self._require(brand_id)
        url = brand.url
        await self.brand_repo.delete(brand)
        self.storage.delete_after_commit(self.session, url)
        logger.info("Brand deleted", brand_id=brand_id, request_id=self.request_id)

    async def _require(self, brand_id: int) -> Brand:
        brand = await self.brand_repo.get_by_id(brand_id)
        if brand is None:
            raise BrandNotFoundError(brand_id)
        return brand

    def _to_dto(self, brand: Brand) -> BrandDTO:
        return BrandDTO(id=brand.id, name=brand.name, photo=self.storage.public_url(brand.url))


def get_brand_service(session: AsyncSession, request_id: str | None = None) -> BrandService:
    """Get brand service instance."""
    return BrandService(session, request_id=request_id)
