"""Catalog application service.

Orchestrates catalog management:
- Creating catalogs with a first localization and colors
- Adding and updating localizations
- Building the per-language catalog detail from the joined rows
"""

from dataclasses import dataclass, field
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.application.language_service import LanguageService
from plumbing.domain.exceptions import CatalogExistsError, CatalogNotFoundError
from plumbing.infrastructure.models import Catalog, CatalogLocalization
from plumbing.repositories.catalog import CatalogRepository

logger = structlog.get_logger()


# ============================================================================
# Catalog Data Transfer Objects
# ============================================================================


@dataclass
class ColorDTO:
    """Color data transfer object."""

    id: int
    name: str
    hash_color: str


@dataclass
class ColorInput:
    """Color as submitted by a client."""

    name: str
    hash_color: str


@dataclass
class CatalogLanguageDTO:
    """Catalog content in one language."""

    language_code: str
    name: str
    description: str
    colors: list[ColorDTO] = field(default_factory=list)


@dataclass
class CatalogDetailDTO:
    """Catalog with every localization."""

    id: int
    price: float
    languages: list[CatalogLanguageDTO] = field(default_factory=list)


@dataclass
class CatalogSummaryDTO:
    """Catalog in a single language."""

    id: int
    price: float
    name: str
    description: str
    colors: list[ColorDTO] = field(default_factory=list)


def group_detail_rows(rows: list[dict[str, Any]]) -> CatalogDetailDTO | None:
    """Fold flat catalog rows into a nested detail.

    Rows carry one localization and at most one color each. Languages
    keep the order of their first row and every language lists each
    color once.

    Args:
        rows: Row mappings as returned by ``CatalogRepository.get_detail_rows``.

    Returns:
        Nested detail, None when there are no rows.
    """
    if not rows:
        return None

    detail = CatalogDetailDTO(id=rows[0]["id"], price=rows[0]["price"])
    by_code: dict[str, CatalogLanguageDTO] = {}

    for row in rows:
        entry = by_code.get(row["language_code"])
        if entry is None:
            entry = CatalogLanguageDTO(
                language_code=row["language_code"],
                name=row["name"],
                description=row["description"],
            )
            by_code[row["language_code"]] = entry
            detail.languages.append(entry)

        if row["color_id"] is not None and all(c.id != row["color_id"] for c in entry.colors):
            entry.colors.append(
                ColorDTO(id=row["color_id"], name=row["color_name"], hash_color=row["hash_color"])
            )

    return detail


# ============================================================================
# Catalog Service
# ============================================================================


class CatalogService:
    """Application service for catalogs.

    Example usage:
        service = CatalogService(session)
        detail = await service.create_catalog(
            price=1200.0,
            language_id=1,
            name="Смеситель",
            description="Хром",
            colors=[ColorInput(name="Chrome", hash_color="#C0C0C0")],
        )
    """

    def __init__(self, session: AsyncSession, request_id: str | None = None) -> None:
        """Initialize service.

        Args:
            session: Database session.
            request_id: Request ID for correlation.
        """
        self.catalog_repo = CatalogRepository(session)
        self.languages = LanguageService(session, request_id=request_id)
        self.request_id = request_id

    async def create_catalog(
        self,
        price: float,
        language_id: int,
        name: str,
        description: str,
        colors: list[ColorInput],
    ) -> CatalogDetailDTO:
        """Create a catalog with its first localization.

        Args:
            price: Base price.
            language_id: Language of the localization.
            name: Localized name.
            description: Localized description.
            colors: Colors, reused when an identical one exists.

        Returns:
            Created catalog detail.

        Raises:
            LanguageNotFoundError: If the language does not exist.
            CatalogExistsError: If the name is already used in that language.
        """
        language = await self.languages.require_id(language_id)

        if await self.catalog_repo.localization_name_exists(name, language_id):
            raise CatalogExistsError(name, language.code)

        catalog = Catalog(price=price, localizations=[], colors=[])
        catalog.localizations.append(
            CatalogLocalization(language=language, name=name, description=description)
        )
        for color_input in colors:
            color = await self.catalog_repo.get_or_create_color(
                color_input.name, color_input.hash_color
            )
            if all(existing.id != color.id for existing in catalog.colors):
                catalog.colors.append(color)

        await self.catalog_repo.save(catalog)

        logger.info(
            "Catalog created",
            catalog_id=catalog.id,
            language=language.code,
            colors=len(catalog.colors),
            request_id=self.request_id,
        )
        return await self.get_catalog(catalog.id)

    async def add_localization(
        self,
        catalog_id: int,
        language_id: int,
        name: str,
        description: str,
    ) -> CatalogDetailDTO:
        """Add a localization to an existing catalog.

        Raises:
            CatalogNotFoundError: If the catalog does not exist.
            LanguageNotFoundError: If the language does not exist.
            CatalogExistsError: If the catalog is already localized in that language
                or another catalog uses the name in it.
        """
        catalog = await self._require(catalog_id)
        language = await self.languages.require_id(language_id)

        if await self.catalog_repo.get_localization(catalog_id, language_id) is not None:
            raise CatalogExistsError(name, language.code)
        if await self.catalog_repo.localization_name_exists(name, language_id):
            raise CatalogExistsError(name, language.code)

        catalog.localizations.append(
            CatalogLocalization(language=language, name=name, description=description)
        )
        await self.catalog_repo.save(catalog)

        logger.info(
            "Catalog localization added",
            catalog_id=catalog_id,
            language=language.code,
            request_id=self.request_id,
        )
        return await self.get_catalog(catalog_id)

    async def list_catalogs(self, language_code: str) -> list[CatalogSummaryDTO]:
        """List catalogs localized in a language.

        Raises:
            LanguageNotFoundError: If the code is unknown.
        """
        language = await self.languages.require_code(language_code)
        rows = await self.catalog_repo.find_by_language(language.id)

        return [
            CatalogSummaryDTO(
                id=catalog.id,
                price=catalog.price,
                name=localization.name,
                description=localization.description,
                colors=[
                    ColorDTO(id=c.id, name=c.name, hash_color=c.hash_color) for c in catalog.colors
                ],
            )
            for catalog, localization in rows
        ]

    async def get_catalog(self, catalog_id: int) -> CatalogDetailDTO:
        """Get a catalog with every localization and its colors.

        Raises:
            CatalogNotFoundError: If the catalog does not exist or has no localization.
        """
        detail = group_detail_rows(await self.catalog_repo.get_detail_rows(catalog_id))
        if detail is None:
            raise CatalogNotFoundError(catalog_id)
        return detail

    async def update_catalog(
        self,
        catalog_id: int,
        price: float,
        language_id: int,
        name: str,
        description: str,
    ) -> CatalogDetailDTO:
        """Update the price and one localization of a catalog.

        Raises:
            CatalogNotFoundError: If the catalog or its localization in
                that language does not exist.
            CatalogExistsError: If another catalog uses the name in that language.
        """
        catalog = await self._require(catalog_id)
        catalog.price = price

        localization = await self.catalog_repo.get_localization(catalog_id, language_id)
        if localization is None:
            raise CatalogNotFoundError(catalog_id)

        if await self.catalog_repo.localization_name_exists(
            name, language_id, exclude_catalog_id=catalog_id
        ):
            raise CatalogExistsError(name, localization.language.code)

        localization.name = name
        localization.description = description
        await self.catalog_repo.save(catalog)

        logger.info(
            "Catalog updated",
            catalog_id=catalog_id,
            language_id=language_id,
            request_id=self.request_id,
        )
        return await self.get_catalog(catalog_id)

    async def delete_catalog(self, catalog_id: int) -> None:
        """Delete a catalog with its localizations and color links.

        Raises:
            CatalogNotFoundError: If the catalog does not exist.
        """
        catalog = await self._require(catalog_id)
        await self.catalog_repo.delete(catalog)
        logger.info("Catalog deleted", catalog_id=catalog_id, request_id=self.request_id)

    async def _require(self, catalog_id: int) -> Catalog:
        catalog = await self.catalog_repo.get_by_id(catalog_id)
        if catalog is None:
            raise CatalogNotFoundError(catalog_id)
        return catalog


def get_catalog_service(session: AsyncSession, request_id: str | None = None) -> CatalogService:
    """Get catalog service instance.

    Args:
        session: Database session.
        request_id: Request ID for correlation.

    Returns:
        CatalogService instance.
    """
    return CatalogService(session, request_id=request_id)
