"""Collection application service.

Orchestrates collection management:
- Language-aware listings (all, popular, new, producers, painted, search)
- Random recommendations with popular collections first
- Multipart create and partial update with photo uploads
- Cascading deletion of items, photos and stored files
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

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
from plumbing.domain.exceptions import CollectionExistsError, CollectionNotFoundError
from plumbing.domain.localization import validate_language_codes
from plumbing.domain.pricing import discounted_price
from plumbing.infrastructure.models import Collection, CollectionTranslation
from plumbing.repositories.collection import CollectionRepository
from plumbing.repositories.discount import DiscountRepository
from plumbing.repositories.filters import ListingFilter

logger = structlog.get_logger()

RECOMMENDATION_LIMIT = 7


# ============================================================================
# Collection Data Transfer Objects
# ============================================================================


@dataclass
class TranslationInput:
    """Name and description in one language."""

    language_code: str
    name: str
    description: str = ""


@dataclass
class CollectionInput:
    """Collection fields submitted by a client.

    On update, fields left as None keep their stored value.
    """

    price: float | None = None
    is_producer: bool | None = None
    is_painted: bool | None = None
    is_popular: bool | None = None
    is_new: bool | None = None
    translations: list[TranslationInput] | None = None


@dataclass
class CollectionDTO:
    """Collection in a single language."""

    id: int
    name: str
    description: str
    price: float
    new_price: float
    is_producer: bool
    is_painted: bool
    is_popular: bool
    is_new: bool
    photos: list[PhotoDTO] = field(default_factory=list)
    colors: list[ColorTagDTO] = field(default_factory=list)


@dataclass
class CollectionDetailDTO:
    """Collection with every translation, used by the admin form."""

    id: int
    price: float
    is_producer: bool
    is_painted: bool
    is_popular: bool
    is_new: bool
    translations: list[TranslationInput] = field(default_factory=list)
    photos: list[PhotoDTO] = field(default_factory=list)
    colors: list[ColorTagDTO] = field(default_factory=list)


def _to_dto(
    collection: Collection,
    translation: CollectionTranslation,
    percentage: float | None,
) -> CollectionDTO:
    return CollectionDTO(
        id=collection.id,
        name=translation.name,
        description=translation.description,
        price=collection.price,
        new_price=discounted_price(collection.price, percentage),
        is_producer=collection.is_producer,
        is_painted=collection.is_painted,
        is_popular=collection.is_popular,
        is_new=collection.is_new,
        photos=photo_views(collection.photos),
        colors=photo_colors(collection.photos),
    )


def _to_detail(collection: Collection) -> CollectionDetailDTO:
    return CollectionDetailDTO(
        id=collection.id,
        price=collection.price,
        is_producer=collection.is_producer,
        is_painted=collection.is_painted,
        is_popular=collection.is_popular,
        is_new=collection.is_new,
        translations=[
            TranslationInput(
                language_code=t.language_code,
                name=t.name,
                description=t.description,
            )
            for t in collection.translations
        ],
        photos=photo_views(collection.photos),
        colors=photo_colors(collection.photos),
    )


# ============================================================================
# Collection Service
# ============================================================================


class CollectionService:
    """Application service for collections.

    Example usage:
        service = CollectionService(session, request_id="req-1")
        popular = await service.list_collections("ru", ListingFilter(is_popular=True))
    """

    def __init__(self, session: AsyncSession, request_id: str | None = None) -> None:
        """Initialize service.

        Args:
            session: Database session.
            request_id: Request ID for correlation.
        """
        self.session = session
        self.collection_repo = CollectionRepository(session)
        self.discount_repo = DiscountRepository(session)
        self.languages = LanguageService(session, request_id=request_id)
        self.request_id = request_id

    async def list_collections(
        self,
        language_code: str,
        listing_filter: ListingFilter | None = None,
    ) -> list[CollectionDTO]:
        """List collections in a language.

        Args:
            language_code: Language code.
            listing_filter: Flag, price and name filters.

        Returns:
            Matching collections, possibly empty.

        Raises:
            LanguageNotFoundError: If the code is unknown.
        """
        await self.languages.require_code(language_code)
        rows = await self.collection_repo.find_by_language(language_code, listing_filter)
        return await self._views(rows)

    async def search_collections(
        self,
        language_code: str,
        listing_filter: ListingFilter,
    ) -> list[CollectionDTO]:
        """Search collections by name, flags and price range.

        Raises:
            CollectionNotFoundError: If nothing matches.
        """
        collections = await self.list_collections(language_code, listing_filter)
        if not collections:
            raise CollectionNotFoundError()
        return collections

    async def recommend_collections(self, language_code: str) -> list[CollectionDTO]:
        """Pick random collections, popular ones first."""
        await self.languages.require_code(language_code)
        rows = await self.collection_repo.find_by_language(
            language_code,
            shuffle=True,
            limit=RECOMMENDATION_LIMIT,
        )
        return await self._views(rows)

    async def get_collection(self, collection_id: int, language_code: str) -> CollectionDTO:
        """Get a collection in a language.

        Raises:
            LanguageNotFoundError: If the code is unknown.
            CollectionNotFoundError: If the collection has no translation in that language.
        """
        await self.languages.require_code(language_code)
        collection = await self.require(collection_id)

        for translation in collection.translations:
            if translation.language_code == language_code:
                views = await self._views([(collection, translation)])
                return views[0]
        raise CollectionNotFoundError(collection_id)

    async def get_collection_detail(self, collection_id: int) -> CollectionDetailDTO:
        """Get a collection with every translation."""
        return _to_detail(await self.require(collection_id))

    async def create_collection(
        self,
        data: CollectionInput,
        uploads: list[PhotoUpload],
    ) -> CollectionDetailDTO:
        """Create a collection with photos.

        Args:
            data: Collection fields, translations required.
            uploads: Photos to attach.

        Returns:
            Created collection.

        Raises:
            RequiredLanguageError: If the translations do not cover every language.
            InvalidLanguageCodeError: If a code is unknown or repeated.
            CollectionExistsError: If a name is already used in its language.
            InvalidImageError: If an upload is not an image.
        """
        translations = data.translations or []
        validate_language_codes(t.language_code for t in translations)
        await self._check_names(translations)
        validate_uploads(uploads)

        collection = Collection(
            price=data.price or 0.0,
            is_producer=bool(data.is_producer),
            is_painted=bool(data.is_painted),
            is_popular=bool(data.is_popular),
            is_new=bool(data.is_new),
            translations=[
                CollectionTranslation(
                    language_code=t.language_code,
                    name=t.name,
                    description=t.description,
                )
                for t in translations
            ],
            photos=store_photos(uploads),
        )
        await self.collection_repo.save(collection)

        logger.info(
            "Collection created",
            collection_id=collection.id,
            photos=len(uploads),
            request_id=self.request_id,
        )
        return _to_detail(collection)

    async def update_collection(
        self,
        collection_id: int,
        data: CollectionInput,
        uploads: list[PhotoUpload],
    ) -> CollectionDetailDTO:
        """Update a collection, keeping fields that are not supplied.

        Translations are upserted by language code and new photos are
        appended to the existing ones.

        Raises:
            CollectionNotFoundError: If the collection does not exist.
            CollectionExistsError: If a name is used by another collection.
        """
        collection = await self.require(collection_id)

        if data.translations is not None:
            validate_language_codes(t.language_code for t in data.translations)
            await self._check_names(data.translations, exclude_id=collection_id)
        validate_uploads(uploads)

        if data.price is not None:
            collection.price = data.price
        if data.is_producer is not None:
            collection.is_producer = data.is_producer
        if data.is_painted is not None:
            collection.is_painted = data.is_painted
        if data.is_popular is not None:
            collection.is_popular = data.is_popular
        if data.is_new is not None:
            collection.is_new = data.is_new

        if data.translations is not None:
            existing = {t.language_code: t for t in collection.translations}
            for translation in data.translations:
                current = existing.get(translation.language_code)
                if current is None:
                    collection.translations.append(
                        CollectionTranslation(
                            language_code=translation.language_code,
                            name=translation.name,
                            description=translation.description,
                        )
                    )
                else:
                    current.name = translation.name
                    current.description = translation.description

        collection.photos.extend(store_photos(uploads))
        await self.collection_repo.save(collection)

        logger.info(
            "Collection updated",
            collection_id=collection_id,
            new_photos=len(uploads),
            request_id=self.request_id,
        )
        return _to_detail(collection)

    async def delete_collection(self, collection_id: int) -> None:
        """Delete a collection with its items and photos.

        Raises:
            CollectionNotFoundError: If the collection does not exist.
        """
        collection = await self.require(collection_id)
        urls = await self.collection_repo.delete(collection)
        remove_files(self.session, urls)

        logger.info(
            "Collection deleted",
            collection_id=collection_id,
            removed_files=len(urls),
            request_id=self.request_id,
        )

    async def require(self, collection_id: int) -> Collection:
        """Get a collection by id.

        Raises:
            CollectionNotFoundError: If the collection does not exist.
        """
        collection = await self.collection_repo.get_by_id(collection_id)
        if collection is None:
            raise CollectionNotFoundError(collection_id)
        return collection

    async def _views(
        self,
        rows: list[tuple[Collection, CollectionTranslation]],
    ) -> list[CollectionDTO]:
        percentages = await self.discount_repo.active_percentages(
            "collection",
            [collection.id for collection, _ in rows],
            datetime.now(timezone.utc),
        )
        return [
            _to_dto(collection, translation, percentages.get(collection.id))
            for collection, translation in rows
        ]

    async def _check_names(
        self,
        translations: list[TranslationInput],
        exclude_id: int | None = None,
    ) -> None:
        for translation in translations:
            if await self.collection_repo.name_exists(
                translation.name, translation.language_code, exclude_id=exclude_id
            ):
                raise CollectionExistsError(translation.name, translation.language_code)


def get_collection_service(
    session: AsyncSession,
    request_id: str | None = None,
) -> CollectionService:
    """Get collection service instance.

    Args:
        session: Database session.
        request_id: Request ID for correlation.

    Returns:
        CollectionService instance.
    """
    return CollectionService(session, request_id=request_id)
