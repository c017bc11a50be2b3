"""Catalog repository for database operations.

Provides CRUD operations for catalogs, their localizations and colors,
plus the joined read used to build the per-language catalog detail.
"""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.infrastructure.models import (
    Catalog,
    CatalogLocalization,
    Color,
    Language,
    catalog_colors,
)


class CatalogRepository:
    """Repository for Catalog database operations.

    Example usage:
        repo = CatalogRepository(session)
        rows = await repo.get_detail_rows(catalog_id=1)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, catalog: Catalog) -> Catalog:
        """Save a catalog with its localizations and color links.

        Args:
            catalog: Catalog to save.

        Returns:
            Saved catalog with assigned id.
        """
        self.session.add(catalog)
        await self.session.flush()
        return catalog

    async def get_by_id(self, catalog_id: int) -> Catalog | None:
        """Get catalog by ID.

        Localizations and colors are loaded eagerly.

        Args:
            catalog_id: Catalog ID.

        Returns:
            Catalog if found, None otherwise.
        """
        result = await self.session.execute(select(Catalog).where(Catalog.id == catalog_id))
        return result.scalar_one_or_none()

    async def localization_name_exists(
        self,
        name: str,
        language_id: int,
        exclude_catalog_id: int | None = None,
    ) -> bool:
        """Check whether any catalog already uses a name in a language.

        Args:
            name: Localized catalog name.
            language_id: Language of the name.
            exclude_catalog_id: Catalog whose own localizations are ignored.

        Returns:
            True if a localization with the same name and language exists.
        """
        query = select(CatalogLocalization.id).where(
            and_(
                CatalogLocalization.name == name,
                CatalogLocalization.language_id == language_id,
            )
        )
        if exclude_catalog_id is not None:
            query = query.where(CatalogLocalization.catalog_id != exclude_catalog_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none() is not None

    async def get_localization(
        self,
        catalog_id: int,
        language_id: int,
    ) -> CatalogLocalization | None:
        """Get one localization of a catalog.

        Args:
            catalog_id: Catalog ID.
            language_id: Language ID.

        Returns:
            Localization if found, None otherwise.
        """
        query = select(CatalogLocalization).where(
            and_(
                CatalogLocalization.catalog_id == catalog_id,
                CatalogLocalization.language_id == language_id,
            )
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def find_by_language(
        self,
        language_id: int,
    ) -> Sequence[tuple[Catalog, CatalogLocalization]]:
        """Find catalogs localized in a language.

        Args:
            language_id: Language ID.

        Returns:
            Pairs of catalog and its localization, ordered by catalog id.
        """
        query = (
            select(Catalog, CatalogLocalization)
            .join(CatalogLocalization, CatalogLocalization.catalog_id == Catalog.id)
            .where(CatalogLocalization.language_id == language_id)
            .order_by(Catalog.id)
        )
        result = await self.session.execute(query)
        return [(row[0], row[1]) for row in result.all()]

    async def get_detail_rows(self, catalog_id: int) -> list[dict[str, Any]]:
        """Get the flat joined rows of a catalog detail.

        Joins catalog price with every localization, its language code
        and, through the color link table, every color. Catalogs without
        colors still produce one row per localization.

        Args:
            catalog_id: Catalog ID.

        Returns:
            Row mappings ordered by language and color.
        """
        query = (
            select(
                Catalog.id.label("id"),
                Catalog.price.label("price"),
                Language.code.label("language_code"),
                CatalogLocalization.name.label("name"),
                CatalogLocalization.description.label("description"),
                Color.id.label("color_id"),
                Color.name.label("color_name"),
                Color.hash_color.label("hash_color"),
            )
            .join(CatalogLocalization, CatalogLocalization.catalog_id == Catalog.id)
            .join(Language, Language.id == CatalogLocalization.language_id)
            .outerjoin(catalog_colors, catalog_colors.c.catalog_id == Catalog.id)
            .outerjoin(Color, Color.id == catalog_colors.c.color_id)
            .where(Catalog.id == catalog_id)
            .order_by(Language.id, Color.id)
        )
        result = await self.session.execute(query)
        return [dict(row) for row in result.mappings().all()]

    async def get_or_create_color(self, name: str, hash_color: str) -> Color:
        """Get a color by name and hex value, creating it when missing.

        Args:
            name: Color name.
            hash_color: Hex value.

        Returns:
            Existing or newly created color.
        """
        query = select(Color).where(and_(Color.name == name, Color.hash_color == hash_color))
        result = await self.session.execute(query)
        color = result.scalar_one_or_none()
        if color is None:
            color = Color(name=name, hash_color=hash_color)
            self.session.add(color)
            await self.session.flush()
        return color

    async def delete(self, catalog: Catalog) -> None:
        """Delete a catalog, its localizations and color links.

        Args:
            catalog: Catalog to delete.
        """
        await self.session.delete(catalog)
        await self.session.flush()
