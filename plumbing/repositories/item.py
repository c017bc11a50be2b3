"""Item repository for database operations.

Provides CRUD operations for items with language-aware filtering.
"""

from collections.abc import Sequence

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.infrastructure.models import Item, ItemTranslation
from plumbing.repositories.filters import ListingFilter


class ItemRepository:
    """Repository for Item database operations.

    Example usage:
        repo = ItemRepository(session)
        rows = await repo.find_by_language(
            "en",
            ListingFilter(category_id=3, exclude_id=12),
            shuffle=True,
            limit=7,
        )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, item: Item) -> Item:
        """Save an item with its translations and photos.

        Args:
            item: Item to save.

        Returns:
            Saved item with assigned id.
        """
        self.session.add(item)
        await self.session.flush()
        return item

    async def get_by_id(self, item_id: int) -> Item | None:
        """Get item by ID.

        Args:
            item_id: Item ID.

        Returns:
            Item with translations and photos, None if not found.
        """
        result = await self.session.execute(select(Item).where(Item.id == item_id))
        return result.scalar_one_or_none()

    async def find_by_language(
        self,
        language_code: str,
        listing_filter: ListingFilter | None = None,
        shuffle: bool = False,
        limit: int | None = None,
    ) -> Sequence[tuple[Item, ItemTranslation]]:
        """Find items translated into a language.

        Args:
            language_code: Language code of the translation to join.
            listing_filter: Ownership, flag, price and name filters.
            shuffle: Order randomly with popular items first instead of by id.
            limit: Maximum results.

        Returns:
            Pairs of item and its translation.
        """
        listing_filter = listing_filter or ListingFilter()
        query = select(Item, ItemTranslation).join(
            ItemTranslation,
            ItemTranslation.item_id == Item.id,
        )

        conditions = [ItemTranslation.language_code == language_code]

        if listing_filter.category_id is not None:
            conditions.append(Item.category_id == listing_filter.category_id)

        if listing_filter.collection_id is not None:
            conditions.append(Item.collection_id == listing_filter.collection_id)

        if listing_filter.is_popular is not None:
            conditions.append(Item.is_popular == listing_filter.is_popular)

        if listing_filter.is_new is not None:
            conditions.append(Item.is_new == listing_filter.is_new)

        if listing_filter.is_producer is not None:
            conditions.append(Item.is_producer == listing_filter.is_producer)

        if listing_filter.is_painted is not None:
            conditions.append(Item.is_painted == listing_filter.is_painted)

        if listing_filter.min_price is not None:
            conditions.append(Item.price >= listing_filter.min_price)

        if listing_filter.max_price is not None:
            conditions.append(Item.price <= listing_filter.max_price)

        if listing_filter.search:
            conditions.append(ItemTranslation.name.ilike(f"%{listing_filter.search}%"))

        if listing_filter.exclude_id is not None:
            conditions.append(Item.id != listing_filter.exclude_id)

        query = query.where(and_(*conditions))

        if shuffle:
            query = query.order_by(Item.is_popular.desc(), func.random())
        else:
            query = query.order_by(Item.id)

        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return [(row[0], row[1]) for row in result.all()]

    async def find_all(self) -> Sequence[Item]:
        """Get every item with all of its translations."""
        result = await self.session.execute(select(Item).order_by(Item.id))
        return result.scalars().all()

    async def name_exists(
        self,
        name: str,
        language_code: str,
        exclude_id: int | None = None,
    ) -> bool:
        """Check whether an item name is taken in a language."""
        conditions = [
            ItemTranslation.name == name,
            ItemTranslation.language_code == language_code,
        ]
        if exclude_id is not None:
            conditions.append(ItemTranslation.item_id != exclude_id)

        query = select(ItemTranslation.item_id).where(and_(*conditions)).limit(1)
        result = await self.session.execute(query)
        return result.scalar_one_or_none() is not None

    async def delete(self, item: Item) -> list[str]:
        """Delete an item with its photos and translations.

        Returns:
            Relative URLs of the deleted photos.
        """
        urls = [photo.url for photo in item.photos]
        for photo in item.photos:
            await self.session.delete(photo)
        await self.session.delete(item)
        await self.session.flush()
        return urls
