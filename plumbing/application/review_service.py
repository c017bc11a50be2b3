"""Review application service."""

from collections.abc import Sequence

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.domain.exceptions import ReviewNotFoundError
from plumbing.infrastructure.models import Review
from plumbing.repositories.review import ReviewRepository

logger = structlog.get_logger()


class ReviewService:
    """Application service for customer reviews.

    New reviews are visible until an administrator hides them.
    """

    def __init__(self, session: AsyncSession, request_id: str | None = None) -> None:
        """Initialize service.

        Args:
            session: Database session.
            request_id: Request ID for correlation.
        """
        self.review_repo = ReviewRepository(session)
        self.request_id = request_id

    async def create_review(self, username: str, rating: int, text: str) -> Review:
        """Submit a review."""
        review = await self.review_repo.save(Review(username=username, rating=rating, text=text))
        logger.info(
            "Review submitted",
            review_id=review.id,
            rating=rating,
            request_id=self.request_id,
        )
        return review

    async def list_visible(self) -> Sequence[Review]:
        """List visible reviews, newest first."""
        return await self.review_repo.find_all(is_show=True)

    async def list_all(self) -> Sequence[Review]:
        """List every review, newest first."""
        return await self.review_repo.find_all()

    async def toggle_visibility(self, review_id: int) -> Review:
        """Show a hidden review or hide a visible one.

        Raises:
            ReviewNotFoundError: If the review does not exist.
        """
        review = await self._require(review_id)
        review.is_show = not review.is_show
        await self.review_repo.save(review)

        logger.info(
            "Review visibility changed",
            review_id=review_id,
            is_show=review.is_show,
            request_id=self.request_id,
        )
        return review

    async def delete_review(self, review_id: int) -> None:
        """Delete a review.

        Raises:
            ReviewNotFoundError: If the review does not exist.
        """
        review = await self._require(review_id)
        await self.review_repo.delete(review)
        logger.info("Review deleted", review_id=review_id, request_id=self.request_id)

    async def _require(self, review_id: int) -> Review:
        review = await self.review_repo.get_by_id(review_id)
        if review is None:
            raise ReviewNotFoundError(review_id)
        return review


def get_review_service(session: AsyncSession, request_id: str | None = None) -> ReviewService:
    """Get review service instance."""
    return ReviewService(session, request_id=request_id)
