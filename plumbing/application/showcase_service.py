"""Showcase application service.

Combines collection and item listings for the storefront pages.
"""

from dataclasses import dataclass, field

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.application.collection_service import CollectionDTO, CollectionService
from plumbing.application.item_service import ItemDTO, ItemService
from plumbing.domain.exceptions import NotFoundError
from plumbing.repositories.filters import ListingFilter

logger = structlog.get_logger()


@dataclass
class ShowcaseDTO:
    """Collections and items shown together."""

    collections: list[CollectionDTO] = field(default_factory=list)
    items: list[ItemDTO] = field(default_factory=list)


class ShowcaseService:
    """Application service for combined storefront listings."""

    def __init__(self, session: AsyncSession, request_id: str | None = None) -> None:
        """Initialize service.

        Args:
            session: Database session.
            request_id: Request ID for correlation.
        """
        self.collections = CollectionService(session, request_id=request_id)
        self.items = ItemService(session, request_id=request_id)
        self.request_id = request_id

    async def popular(self, language_code: str) -> ShowcaseDTO:
        """Get popular collections and items."""
        return await self._combined(language_code, ListingFilter(is_popular=True))

    async def new(self, language_code: str) -> ShowcaseDTO:
        """Get new collections and items."""
        return await self._combined(language_code, ListingFilter(is_new=True))

    async def search(self, language_code: str, listing_filter: ListingFilter) -> ShowcaseDTO:
        """Search collections and items together.

        Raises:
            NotFoundError: If neither collections nor items match.
        """
        result = await self._combined(language_code, listing_filter)
        if not result.collections and not result.items:
            logger.info(
                "Search found nothing",
                search=listing_filter.search,
                language=language_code,
                request_id=self.request_id,
            )
            raise NotFoundError(listing_filter.search, field="q")
        return result

    async def _combined(self, language_code: str, listing_filter: ListingFilter) -> ShowcaseDTO:
        return ShowcaseDTO(
            collections=await self.collections.list_collections(language_code, listing_filter),
            items=await self.items.list_items(language_code, listing_filter),
        )


def get_showcase_service(session: AsyncSession, request_id: str | None = None) -> ShowcaseService:
    """Get showcase service instance."""
    return ShowcaseService(session, request_id=request_id)
