"""Item application service.

Orchestrates item management:
- Language-aware listings by category, collection and flags
- Recommendations from the same category
- Multipart create and partial update with photo uploads
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.application.category_service import CategoryService
from plumbing.application.collection_service import (
    RECOMMENDATION_LIMIT,
    CollectionService,
    TranslationInput,
)
from plumbing.application.language_service import LanguageService
from plumbing.application.photo_service import (
    ColorTagDTO,
    PhotoDTO,
    PhotoUpload,
    photo_colors,
    photo_views,
    remove_files,
    store_photos,
    validate_uploads,
)
from plumbing.domain.exceptions import ItemExistsError, ItemNotFoundError
from plumbing.domain.localization import validate_language_codes
from plumbing.domain.pricing import discounted_price
from plumbing.infrastructure.models import Item, ItemTranslation
from plumbing.repositories.discount import DiscountRepository
from plumbing.repositories.filters import ListingFilter
from plumbing.repositories.item import ItemRepository

logger = structlog.get_logger()


# ============================================================================
# Item Data Transfer Objects
# ============================================================================


@dataclass
class ItemInput:
    """Item fields submitted by a client.

    On update, fields left as None keep their stored value.
    """

    category_id: int | None = None
    collection_id: int | None = None
    size: str | None = None
    price: float | None = None
    is_producer: bool | None = None
    is_painted: bool | None = None
    is_popular: bool | None = None
    is_new: bool | None = None
    translations: list[TranslationInput] | None = None


@dataclass
class ItemDTO:
    """Item in a single language."""

    id: int
    category_id: int
    collection_id: int
    name: str
    description: str
    size: str
    price: float
    new_price: float
    is_producer: bool
    is_painted: bool
    is_popular: bool
    is_new: bool
    photos: list[PhotoDTO] = field(default_factory=list)
    colors: list[ColorTagDTO] = field(default_factory=list)


@dataclass
class ItemDetailDTO:
    """Item with every translation."""

    id: int
    category_id: int
    collection_id: int
    size: str
    price: float
    is_producer: bool
    is_painted: bool
    is_popular: bool
    is_new: bool
    translations: list[TranslationInput] = field(default_factory=list)
    photos: list[PhotoDTO] = field(default_factory=list)
    colors: list[ColorTagDTO] = field(default_factory=list)


def _to_dto(item: Item, translation: ItemTranslation, percentage: float | None) -> ItemDTO:
    return ItemDTO(
        id=item.id,
        category_id=item.category_id,
        collection_id=item.collection_id,
        name=translation.name,
        description=translation.description,
        size=item.size,
        price=item.price,
        new_price=discounted_price(item.price, percentage),
        is_producer=item.is_producer,
        is_painted=item.is_painted,
        is_popular=item.is_popular,
        is_new=item.is_new,
        photos=photo_views(item.photos),
        colors=photo_colors(item.photos),
    )


def _to_detail(item: Item) -> ItemDetailDTO:
    return ItemDetailDTO(
        id=item.id,
        category_id=item.category_id,
        collection_id=item.collection_id,
        size=item.size,
        price=item.price,
        is_producer=item.is_producer,
        is_painted=item.is_painted,
        is_popular=item.is_popular,
        is_new=item.is_new,
        translations=[
            TranslationInput(
                language_code=t.language_code,
                name=t.name,
                description=t.description,
            )
            for t in item.translations
        ],
        photos=photo_views(item.photos),
        colors=photo_colors(item.photos),
    )


# ============================================================================
# Item Service
# ============================================================================


class ItemService:
    """Application service for items.

    Example usage:
        service = ItemService(session)
        items = await service.list_items("en", ListingFilter(category_id=2))
    """

    def __init__(self, session: AsyncSession, request_id: str | None = None) -> None:
        """Initialize service.

        Args:
            session: Database session.
            request_id: Request ID for correlation.
        """
        self.session = session
        self.item_repo = ItemRepository(session)
        self.discount_repo = DiscountRepository(session)
        self.languages = LanguageService(session, request_id=request_id)
        self.categories = CategoryService(session, request_id=request_id)
        self.collections = CollectionService(session, request_id=request_id)
        self.request_id = request_id

    async def list_items(
        self,
        language_code: str,
        listing_filter: ListingFilter | None = None,
    ) -> list[ItemDTO]:
        """List items in a language.

        Raises:
            LanguageNotFoundError: If the code is unknown.
        """
        await self.languages.require_code(language_code)
        rows = await self.item_repo.find_by_language(language_code, listing_filter)
        return await self._views(rows)

    async def list_all_items(self) -> list[ItemDetailDTO]:
        """List every item with all translations."""
        return [_to_detail(item) for item in await self.item_repo.find_all()]

    async def list_by_category(self, category_id: int, language_code: str) -> list[ItemDTO]:
        """List items of a category.

        Raises:
            CategoryNotFoundError: If the category does not exist.
        """
        await self.categories.require(category_id)
        return await self.list_items(language_code, ListingFilter(category_id=category_id))

    async def list_by_collection(self, collection_id: int, language_code: str) -> list[ItemDTO]:
        """List items of a collection.

        Raises:
            CollectionNotFoundError: If the collection does not exist.
        """
        await self.collections.require(collection_id)
        return await self.list_items(language_code, ListingFilter(collection_id=collection_id))

    async def search_items(self, language_code: str, listing_filter: ListingFilter) -> list[ItemDTO]:
        """Search items by name, flags and price range.

        Raises:
            ItemNotFoundError: If nothing matches.
        """
        items = await self.list_items(language_code, listing_filter)
        if not items:
            raise ItemNotFoundError()
        return items

    async def recommend_items(self, item_id: int, language_code: str) -> list[ItemDTO]:
        """Pick random items from the category of an item, popular ones first.

        Raises:
            ItemNotFoundError: If the item does not exist.
        """
        await self.languages.require_code(language_code)
        item = await self.require(item_id)
        rows = await self.item_repo.find_by_language(
            language_code,
            ListingFilter(category_id=item.category_id, exclude_id=item.id),
            shuffle=True,
            limit=RECOMMENDATION_LIMIT,
        )
        return await self._views(rows)

    async def get_item(self, item_id: int, language_code: str) -> ItemDTO:
        """Get an item in a language.

        Raises:
            LanguageNotFoundError: If the code is unknown.
            ItemNotFoundError: If the item has no translation in that language.
        """
        await self.languages.require_code(language_code)
        item = await self.require(item_id)

        for translation in item.translations:
            if translation.language_code == language_code:
                views = await self._views([(item, translation)])
                return views[0]
        raise ItemNotFoundError(item_id)

    async def create_item(self, data: ItemInput, uploads: list[PhotoUpload]) -> ItemDetailDTO:
        """Create an item with photos.

        Raises:
            CategoryNotFoundError: If the category does not exist.
            CollectionNotFoundError: If the collection does not exist.
            RequiredLanguageError: If the translations do not cover every language.
            ItemExistsError: If a name is already used in its language.
            InvalidImageError: If an upload is not an image.
        """
        await self.categories.require(data.category_id)
        await self.collections.require(data.collection_id)

        translations = data.translations or []
        validate_language_codes(t.language_code for t in translations)
        await self._check_names(translations)
        validate_uploads(uploads)

        item = Item(
            category_id=data.category_id,
            collection_id=data.collection_id,
            size=data.size or "",
            price=data.price or 0.0,
            is_producer=bool(data.is_producer),
            is_painted=bool(data.is_painted),
            is_popular=bool(data.is_popular),
            is_new=bool(data.is_new),
            translations=[
                ItemTranslation(
                    language_code=t.language_code,
                    name=t.name,
                    description=t.description,
                )
                for t in translations
            ],
            photos=store_photos(uploads),
        )
        await self.item_repo.save(item)

        logger.info(
            "Item created",
            item_id=item.id,
            category_id=item.category_id,
            collection_id=item.collection_id,
            request_id=self.request_id,
        )
        return _to_detail(item)

    async def update_item(
        self,
        item_id: int,
        data: ItemInput,
        uploads: list[PhotoUpload],
    ) -> ItemDetailDTO:
        """Update an item, keeping fields that are not supplied.

        Raises:
            ItemNotFoundError: If the item does not exist.
            CategoryNotFoundError: If a new category does not exist.
            CollectionNotFoundError: If a new collection does not exist.
            ItemExistsError: If a name is used by another item.
        """
        item = await self.require(item_id)

        if data.category_id is not None:
            await self.categories.require(data.category_id)
            item.category_id = data.category_id
        if data.collection_id is not None:
            await self.collections.require(data.collection_id)
            item.collection_id = data.collection_id

        if data.translations is not None:
            validate_language_codes(t.language_code for t in data.translations)
            await self._check_names(data.translations, exclude_id=item_id)
        validate_uploads(uploads)

        if data.size is not None:
            item.size = data.size
        if data.price is not None:
            item.price = data.price
        if data.is_producer is not None:
            item.is_producer = data.is_producer
        if data.is_painted is not None:
            item.is_painted = data.is_painted
        if data.is_popular is not None:
            item.is_popular = data.is_popular
        if data.is_new is not None:
            item.is_new = data.is_new

        if data.translations is not None:
            existing = {t.language_code: t for t in item.translations}
            for translation in data.translations:
                current = existing.get(translation.language_code)
                if current is None:
                    item.translations.append(
                        ItemTranslation(
                            language_code=translation.language_code,
                            name=translation.name,
                            description=translation.description,
                        )
                    )
                else:
                    current.name = translation.name
                    current.description = translation.description

        item.photos.extend(store_photos(uploads))
        await self.item_repo.save(item)

        logger.info("Item updated", item_id=item_id, request_id=self.request_id)
        return _to_detail(item)

    async def delete_item(self, item_id: int) -> None:
        """Delete an item with its photos.

        Raises:
            ItemNotFoundError: If the item does not exist.
        """
        item = await self.require(item_id)
        urls = await self.item_repo.delete(item)
        remove_files(self.session, urls)
        logger.info("Item deleted", item_id=item_id, request_id=self.request_id)

    async def require(self, item_id: int) -> Item:
        """Get an item by id.

        Raises:
            ItemNotFoundError: If the item does not exist.
        """
        item = await self.item_repo.get_by_id(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    async def _views(self, rows: list[tuple[Item, ItemTranslation]]) -> list[ItemDTO]:
        percentages = await self.discount_repo.active_percentages(
            "item",
            [item.id for item, _ in rows],
            datetime.now(timezone.utc),
        )
        return [_to_dto(item, translation, percentages.get(item.id)) for item, translation in rows]

    async def _check_names(
        self,
        translations: list[TranslationInput],
        exclude_id: int | None = None,
    ) -> None:
        for translation in translations:
            if await self.item_repo.name_exists(
                translation.name, translation.language_code, exclude_id=exclude_id
            ):
                raise ItemExistsError(translation.name, translation.language_code)


def get_item_service(session: AsyncSession, request_id: str | None = None) -> ItemService:
    """Get item service instance.

    Args:
        session: Database session.
        request_id: Request ID for correlation.

    Returns:
        ItemService instance.
    """
    return ItemService(session, request_id=request_id)
