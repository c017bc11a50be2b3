"""Discount repository for database operations.

Activeness is always evaluated in SQL against a caller-supplied
moment, so every comparison uses the same clock.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.infrastructure.models import Discount


class DiscountRepository:
    """Repository for Discount database operations.

    Example usage:
        repo = DiscountRepository(session)
        percentages = await repo.active_percentages("item", [1, 2, 3], now)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, discount: Discount) -> Discount:
        """Save a discount."""
        self.session.add(discount)
        await self.session.flush()
        return discount

    async def get_by_id(self, discount_id: int) -> Discount | None:
        """Get discount by ID."""
        return await self.session.get(Discount, discount_id)

    async def find_running(
        self,
        discount_type: str,
        target_id: int,
        now: datetime,
    ) -> Discount | None:
        """Find a discount on a target that has not ended yet.

        Scheduled discounts that have not started count as running.

        Args:
            discount_type: "collection" or "item".
            target_id: Discounted record.
            now: Reference moment.

        Returns:
            The first such discount, None if there is none.
        """
        query = (
            select(Discount)
            .where(
                and_(
                    Discount.discount_type == discount_type,
                    Discount.target_id == target_id,
                    Discount.end_date >= now,
                )
            )
            .order_by(Discount.id)
            .limit(1)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def find_active(self, now: datetime) -> Sequence[Discount]:
        """Get discounts whose period contains a moment, ordered by id."""
        query = (
            select(Discount)
            .where(and_(Discount.start_date <= now, Discount.end_date >= now))
            .order_by(Discount.id)
        )
        result = await self.session.execute(query)
        return result.scalars().all()

    async def active_percentages(
        self,
        discount_type: str,
        target_ids: Iterable[int],
        now: datetime,
    ) -> dict[int, float]:
        """Get the active discount percentage for each discounted target.

        Args:
            discount_type: "collection" or "item".
            target_ids: Records to look up.
            now: Reference moment.

        Returns:
            Mapping of target id to percentage. Targets without an
            active discount are absent.
        """
        target_ids = list(target_ids)
        if not target_ids:
            return {}

        query = (
            select(Discount.target_id, Discount.discount_percentage)
            .where(
                and_(
                    Discount.discount_type == discount_type,
                    Discount.target_id.in_(target_ids),
                    Discount.start_date <= now,
                    Discount.end_date >= now,
                )
            )
            .order_by(Discount.id)
        )
        result = await self.session.execute(query)

        percentages: dict[int, float] = {}
        for target_id, percentage in result.all():
            percentages.setdefault(target_id, percentage)
        return percentages

    async def delete(self, discount: Discount) -> None:
        """Delete a discount."""
        await self.session.delete(discount)
        await self.session.flush()
