"""Starter data application service.

Seeds demo categories, collections and items into an empty database.
Languages come from the initial migration.
"""

from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.domain.exceptions import AlreadySeededError
from plumbing.infrastructure.models import (
    Category,
    CategoryTranslation,
    Collection,
    CollectionTranslation,
    Item,
    ItemTranslation,
)
from plumbing.repositories.category import CategoryRepository

logger = structlog.get_logger()


# ============================================================================
# Demo Data
# ============================================================================


STARTER_CATEGORIES: list[dict[str, str]] = [
    {"ru": "Смесители", "kgz": "Аралаштыргычтар", "en": "Faucets"},
    {"ru": "Раковины", "kgz": "Раковиналар", "en": "Sinks"},
    {"ru": "Унитазы", "kgz": "Унитаздар", "en": "Toilets"},
]

STARTER_COLLECTIONS: list[dict[str, Any]] = [
    {
        "price": 500.0,
        "flags": (True, True, True, False),
        "translations": {
            "ru": ("Классика", "Хромированная сантехника в классическом стиле"),
            "kgz": ("Классика", "Классикалык стилдеги хромдолгон сантехника"),
            "en": ("Classic", "Chrome-plated fixtures in a classic style"),
        },
    },
    {
        "price": 1000.0,
        "flags": (False, False, False, True),
        "translations": {
            "ru": ("Модерн", "Минималистичные формы для современной ванной"),
            "kgz": ("Модерн", "Заманбап ванна бөлмөсү үчүн минималисттик формалар"),
            "en": ("Modern", "Minimalist shapes for a contemporary bathroom"),
        },
    },
    {
        "price": 1500.0,
        "flags": (False, True, True, True),
        "translations": {
            "ru": ("Лофт", "Матовая черная отделка"),
            "kgz": ("Лофт", "Күңүрт кара жасалга"),
            "en": ("Loft", "Matte black finish"),
        },
    },
]

# "category" and "collection" index into the lists above.
STARTER_ITEMS: list[dict[str, Any]] = [
    {
        "category": 0,
        "collection": 0,
        "size": "15 cm",
        "price": 320.0,
        "flags": (True, True, True, False),
        "translations": {
            "ru": ("Смеситель для раковины Классика", "Однорычажный, латунь"),
            "kgz": ("Классика раковина аралаштыргычы", "Бир рычагдуу, жез"),
            "en": ("Classic basin faucet", "Single lever, brass"),
        },
    },
    {
        "category": 1,
        "collection": 1,
        "size": "60x45 cm",
        "price": 780.0,
        "flags": (False, False, False, True),
        "translations": {
            "ru": ("Раковина Модерн", "Накладная раковина из керамики"),
            "kgz": ("Модерн раковинасы", "Керамикадан жасалган үстүңкү раковина"),
            "en": ("Modern sink", "Ceramic countertop sink"),
        },
    },
    {
        "category": 2,
        "collection": 2,
        "size": "70x36 cm",
        "price": 1450.0,
        "flags": (False, True, True, True),
        "translations": {
            "ru": ("Унитаз Лофт", "Подвесной унитаз без ободка"),
            "kgz": ("Лофт унитазы", "Алкагы жок илинме унитаз"),
            "en": ("Loft toilet", "Wall-hung rimless toilet"),
        },
    },
]


class StarterService:
    """Application service that fills an empty database with demo data."""

    def __init__(self, session: AsyncSession, request_id: str | None = None) -> None:
        """Initialize service.

        Args:
            session: Database session.
            request_id: Request ID for correlation.
        """
        self.session = session
        self.category_repo = CategoryRepository(session)
        self.request_id = request_id

    async def seed(self) -> dict[str, int]:
        """Insert the demo categories, collections and items.

        Everything is added in the caller's transaction.

        Returns:
            Number of inserted records per kind.

        Raises:
            AlreadySeededError: If any category already exists.
        """
        if await self.category_repo.count() > 0:
            logger.warning("Starter data already exists", request_id=self.request_id)
            raise AlreadySeededError()

        categories = [
            Category(
                translations=[
                    CategoryTranslation(language_code=code, name=name)
                    for code, name in names.items()
                ]
            )
            for names in STARTER_CATEGORIES
        ]
        collections = [self._collection(data) for data in STARTER_COLLECTIONS]
        self.session.add_all(categories + collections)
        await self.session.flush()

        items = [
            self._item(data, categories[data["category"]].id, collections[data["collection"]].id)
            for data in STARTER_ITEMS
        ]
        self.session.add_all(items)
        await self.session.flush()

        counts = {
            "categories": len(categories),
            "collections": len(collections),
            "items": len(items),
        }
        logger.info("Starter data created", request_id=self.request_id, **counts)
        return counts

    @staticmethod
    def _collection(data: dict[str, Any]) -> Collection:
        is_producer, is_painted, is_popular, is_new = data["flags"]
        return Collection(
            price=data["price"],
            is_producer=is_producer,
            is_painted=is_painted,
            is_popular=is_popular,
            is_new=is_new,
            translations=[
                CollectionTranslation(language_code=code, name=name, description=description)
                for code, (name, description) in data["translations"].items()
            ],
        )

    @staticmethod
    def _item(data: dict[str, Any], category_id: int, collection_id: int) -> Item:
        is_producer, is_painted, is_popular, is_new = data["flags"]
        return Item(
            category_id=category_id,
            collection_id=collection_id,
            size=data["size"],
            price=data["price"],
            is_producer=is_producer,
            is_painted=is_painted,
            is_popular=is_popular,
            is_new=is_new,
            translations=[
                ItemTranslation(language_code=code, name=name, description=description)
                for code, (name, description) in data["translations"].items()
            ],
        )


def get_starter_service(session: AsyncSession, request_id: str | None = None) -> StarterService:
    """Get starter service instance."""
    return StarterService(session, request_id=request_id)
