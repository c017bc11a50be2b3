"""Brand repository."""

from collections.abc import Sequence

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.infrastructure.models import Brand


class BrandRepository:
    """Repository for Brand database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, brand: Brand) -> Brand:
        """Save a brand."""
        self.session.add(brand)
        await self.session.flush()
        return brand

    async def get_by_id(self, brand_id: int) -> Brand | None:
        """Get brand by ID."""
        return await self.session.get(Brand, brand_id)

    async def find_all(self) -> Sequence[Brand]:
        """Get every brand ordered by id."""
        result = await self.session.execute(select(Brand).order_by(Brand.id))
        return result.scalars().all()

    async def name_exists(self, name: str, exclude_id: int | None = None) -> bool:
        """Check whether a brand name is taken.

        Args:
            name: Brand name.
            exclude_id: Brand to ignore, used on update.

        Returns:
            True if another brand uses the name.
        """
        conditions = [Brand.name == name]
        if exclude_id is not None:
            conditions.append(Brand.id != exclude_id)

        result = await self.session.execute(select(Brand.id).where(and_(*conditions)).limit(1))
        return result.scalar_one_or_none() is not None

    async def delete(self, brand: Brand) -> None:
        """Delete a brand."""
        await self.session.delete(brand)
        await self.session.flush()
