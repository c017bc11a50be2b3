"""Review repository."""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.infrastructure.models import Review


class ReviewRepository:
    """Repository for Review database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, review: Review) -> Review:
        """Save a review."""
        self.session.add(review)
        await self.session.flush()
        return review

    async def get_by_id(self, review_id: int) -> Review | None:
        """Get review by ID."""
        return await self.session.get(Review, review_id)

    async def find_all(self, is_show: bool | None = None) -> Sequence[Review]:
        """Find reviews, newest first.

        Args:
            is_show: Filter by visibility, None for every review.

        Returns:
            Matching reviews.
        """
        query = select(Review)
        if is_show is not None:
            query = query.where(Review.is_show == is_show)
        query = query.order_by(Review.created_at.desc(), Review.id.desc())

        result = await self.session.execute(query)
        return result.scalars().all()

    async def delete(self, review: Review) -> None:
        """Delete a review."""
        await self.session.delete(review)
        await self.session.flush()
