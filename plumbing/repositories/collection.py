"""Collection repository for database operations.

Provides CRUD operations for collections with language-aware
filtering, photo management and cascading deletion of items.
"""

from collections.abc import Sequence

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.infrastructure.models import Collection, CollectionTranslation, Item
from plumbing.repositories.filters import ListingFilter


class CollectionRepository:
    """Repository for Collection database operations.

    Example usage:
        repo = CollectionRepository(session)
        rows = await repo.find_by_language(
            "ru",
            ListingFilter(is_popular=True),
        )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, collection: Collection) -> Collection:
        """Save a collection with its translations and photos.

        Args:
            collection: Collection to save.

        Returns:
            Saved collection with assigned id.
        """
        self.session.add(collection)
        await self.session.flush()
        return collection

    async def get_by_id(self, collection_id: int) -> Collection | None:
        """Get collection by ID.

        Args:
            collection_id: Collection ID.

        Returns:
            Collection with translations and photos, None if not found.
        """
        result = await self.session.execute(
            select(Collection).where(Collection.id == collection_id)
        )
        return result.scalar_one_or_none()

    async def find_by_language(
        self,
        language_code: str,
        listing_filter: ListingFilter | None = None,
        shuffle: bool = False,
        limit: int | None = None,
    ) -> Sequence[tuple[Collection, CollectionTranslation]]:
        """Find collections translated into a language.

        Args:
            language_code: Language code of the translation to join.
            listing_filter: Flag, price and name filters.
            shuffle: Order randomly with popular collections first
                instead of by id.
            limit: Maximum results.

        Returns:
            Pairs of collection and its translation.
        """
        listing_filter = listing_filter or ListingFilter()
        query = select(Collection, CollectionTranslation).join(
            CollectionTranslation,
            CollectionTranslation.collection_id == Collection.id,
        )

        conditions = [CollectionTranslation.language_code == language_code]

        if listing_filter.is_popular is not None:
            conditions.append(Collection.is_popular == listing_filter.is_popular)

        if listing_filter.is_new is not None:
            conditions.append(Collection.is_new == listing_filter.is_new)

        if listing_filter.is_producer is not None:
            conditions.append(Collection.is_producer == listing_filter.is_producer)

        if listing_filter.is_painted is not None:
            conditions.append(Collection.is_painted == listing_filter.is_painted)

        if listing_filter.min_price is not None:
            conditions.append(Collection.price >= listing_filter.min_price)

        if listing_filter.max_price is not None:
            conditions.append(Collection.price <= listing_filter.max_price)

        if listing_filter.search:
            conditions.append(CollectionTranslation.name.ilike(f"%{listing_filter.search}%"))

        if listing_filter.exclude_id is not None:
            conditions.append(Collection.id != listing_filter.exclude_id)

        query = query.where(and_(*conditions))

        if shuffle:
            query = query.order_by(Collection.is_popular.desc(), func.random())
        else:
            query = query.order_by(Collection.id)

        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return [(row[0], row[1]) for row in result.all()]

    async def name_exists(
        self,
        name: str,
        language_code: str,
        exclude_id: int | None = None,
    ) -> bool:
        """Check whether a collection name is taken in a language.

        Args:
            name: Localized name.
            language_code: Language code.
            exclude_id: Collection to ignore, used on update.

        Returns:
            True if another collection uses the name.
        """
        conditions = [
            CollectionTranslation.name == name,
            CollectionTranslation.language_code == language_code,
        ]
        if exclude_id is not None:
            conditions.append(CollectionTranslation.collection_id != exclude_id)

        query = select(CollectionTranslation.collection_id).where(and_(*conditions)).limit(1)
        result = await self.session.execute(query)
        return result.scalar_one_or_none() is not None

    async def delete(self, collection: Collection) -> list[str]:
        """Delete a collection with its items, photos and translations.

        Args:
            collection: Collection to delete.

        Returns:
            Relative URLs of every deleted photo, so the files can be removed.
        """
        result = await self.session.execute(
            select(Item).where(Item.collection_id == collection.id)
        )
        items = result.scalars().all()

        urls: list[str] = []
        for item in items:
            for photo in item.photos:
                urls.append(photo.url)
                await self.session.delete(photo)
            await self.session.delete(item)

        for photo in collection.photos:
            urls.append(photo.url)
            await self.session.delete(photo)

        await self.session.delete(collection)
        await self.session.flush()
        return urls
