"""Discount application service.

Orchestrates discount management:
- Creating time-boxed discounts on collections and items
- Listing active discounts enriched with the discounted record
- Deleting discounts
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.application.collection_service import CollectionService
from plumbing.application.item_service import ItemService
from plumbing.application.language_service import LanguageService
from plumbing.application.photo_service import (
    ColorTagDTO,
    PhotoDTO,
    photo_colors,
    photo_views,
)
from plumbing.domain.exceptions import (
    DiscountExistsError,
    DiscountNotFoundError,
    InvalidDiscountError,
)
from plumbing.domain.pricing import DiscountType, discounted_price, is_valid_percentage
from plumbing.infrastructure.models import Collection, Discount, Item
from plumbing.repositories.discount import DiscountRepository

logger = structlog.get_logger()


def as_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# ============================================================================
# Discount Data Transfer Objects
# ============================================================================


@dataclass
class DiscountDTO:
    """Discount data transfer object."""

    id: int
    discount_type: DiscountType
    target_id: int
    discount_percentage: float
    start_date: datetime
    end_date: datetime


@dataclass
class ActiveDiscountDTO:
    """Active discount with the discounted record in one language."""

    id: int
    discount_type: DiscountType
    target_id: int
    discount_percentage: float
    start_date: datetime
    end_date: datetime
    name: str
    description: str
    is_producer: bool
    is_painted: bool
    is_popular: bool
    is_new: bool
    old_price: float
    new_price: float
    photos: list[PhotoDTO] = field(default_factory=list)
    colors: list[ColorTagDTO] = field(default_factory=list)


def _to_dto(discount: Discount) -> DiscountDTO:
    return DiscountDTO(
        id=discount.id,
        discount_type=DiscountType(discount.discount_type),
        target_id=discount.target_id,
        discount_percentage=discount.discount_percentage,
        start_date=as_utc(discount.start_date),
        end_date=as_utc(discount.end_date),
    )


# ============================================================================
# Discount Service
# ============================================================================


class DiscountService:
    """Application service for discounts.

    Example usage:
        service = DiscountService(session)
        discount = await service.create_discount(
            DiscountType.ITEM, target_id=4, discount_percentage=15,
            start_date=start, end_date=end,
        )
    """

    def __init__(self, session: AsyncSession, request_id: str | None = None) -> None:
        """Initialize service.

        Args:
            session: Database session.
            request_id: Request ID for correlation.
        """
        self.discount_repo = DiscountRepository(session)
        self.languages = LanguageService(session, request_id=request_id)
        self.collections = CollectionService(session, request_id=request_id)
        self.items = ItemService(session, request_id=request_id)
        self.request_id = request_id

    async def create_discount(
        self,
        discount_type: DiscountType,
        target_id: int,
        discount_percentage: float,
        start_date: datetime,
        end_date: datetime,
    ) -> DiscountDTO:
        """Create a discount on a collection or an item.

        Args:
            discount_type: Kind of the discounted record.
            target_id: Id of the discounted record.
            discount_percentage: Reduction in percent, in (0, 100].
            start_date: First moment the discount applies.
            end_date: Last moment the discount applies.

        Returns:
            Created discount.

        Raises:
            InvalidDiscountError: If the percentage or the period is invalid.
            CollectionNotFoundError: If a discounted collection does not exist.
            ItemNotFoundError: If a discounted item does not exist.
            DiscountExistsError: If the target already has a discount that has not ended.
        """
        if not is_valid_percentage(discount_percentage):
            raise InvalidDiscountError(
                "Discount percentage must be greater than 0 and at most 100",
                details={"discount_percentage": discount_percentage},
            )

        start_date = as_utc(start_date)
        end_date = as_utc(end_date)
        if end_date <= start_date:
            raise InvalidDiscountError(
                "End date must be after start date",
                details={"start_date": start_date.isoformat(), "end_date": end_date.isoformat()},
            )

        await self._require_target(discount_type, target_id)

        now = datetime.now(timezone.utc)
        if await self.discount_repo.find_running(discount_type.value, target_id, now):
            raise DiscountExistsError(discount_type.value, target_id)

        discount = await self.discount_repo.save(
            Discount(
                discount_type=discount_type.value,
                target_id=target_id,
                discount_percentage=discount_percentage,
                start_date=start_date,
                end_date=end_date,
            )
        )

        logger.info(
            "Discount created",
            discount_id=discount.id,
            discount_type=discount_type.value,
            target_id=target_id,
            discount_percentage=discount_percentage,
            request_id=self.request_id,
        )
        return _to_dto(discount)

    async def list_active(self, language_code: str) -> list[ActiveDiscountDTO]:
        """List active discounts with their targets in a language.

        Discounts whose target is gone or not translated into the
        language are skipped.

        Raises:
            LanguageNotFoundError: If the code is unknown.
        """
        await self.languages.require_code(language_code)
        now = datetime.now(timezone.utc)

        result = []
        for discount in await self.discount_repo.find_active(now):
            target = await self._find_target(discount)
            if target is None:
                continue

            translation = next(
                (t for t in target.translations if t.language_code == language_code),
                None,
            )
            if translation is None:
                continue

            dto = _to_dto(discount)
            result.append(
                ActiveDiscountDTO(
                    id=dto.id,
                    discount_type=dto.discount_type,
                    target_id=dto.target_id,
                    discount_percentage=dto.discount_percentage,
                    start_date=dto.start_date,
                    end_date=dto.end_date,
                    name=translation.name,
                    description=translation.description,
                    is_producer=target.is_producer,
                    is_painted=target.is_painted,
                    is_popular=target.is_popular,
                    is_new=target.is_new,
                    old_price=target.price,
                    new_price=discounted_price(target.price, discount.discount_percentage),
                    photos=photo_views(target.photos),
                    colors=photo_colors(target.photos),
                )
            )
        return result

    async def delete_discount(self, discount_id: int) -> None:
        """Delete a discount.

        Raises:
            DiscountNotFoundError: If the discount does not exist.
        """
        discount = await self.discount_repo.get_by_id(discount_id)
        if discount is None:
            raise DiscountNotFoundError(discount_id)

        await self.discount_repo.delete(discount)
        logger.info("Discount deleted", discount_id=discount_id, request_id=self.request_id)

    async def _require_target(self, discount_type: DiscountType, target_id: int) -> None:
        if discount_type == DiscountType.COLLECTION:
            await self.collections.require(target_id)
        else:
            await self.items.require(target_id)

    async def _find_target(self, discount: Discount) -> Collection | Item | None:
        if discount.discount_type == DiscountType.COLLECTION.value:
            return await self.collections.collection_repo.get_by_id(discount.target_id)
        return await self.items.item_repo.get_by_id(discount.target_id)


def get_discount_service(session: AsyncSession, request_id: str | None = None) -> DiscountService:
    """Get discount service instance."""
    return DiscountService(session, request_id=request_id)
