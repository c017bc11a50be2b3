"""Category application service."""

from dataclasses import dataclass, field

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.application.language_service import LanguageService
from plumbing.domain.exceptions import (
    CategoryExistsError,
    CategoryInUseError,
    CategoryNotFoundError,
)
from plumbing.domain.localization import validate_language_codes
from plumbing.infrastructure.models import Category, CategoryTranslation
from plumbing.repositories.category import CategoryRepository

logger = structlog.get_logger()


@dataclass
class CategoryTranslationDTO:
    """Category name in one language."""

    language_code: str
    name: str


@dataclass
class CategoryDTO:
    """Category in a single language."""

    id: int
    name: str


@dataclass
class CategoryDetailDTO:
    """Category with every translation."""

    id: int
    translations: list[CategoryTranslationDTO] = field(default_factory=list)


def _to_detail(category: Category) -> CategoryDetailDTO:
    return CategoryDetailDTO(
        id=category.id,
        translations=[
            CategoryTranslationDTO(language_code=t.language_code, name=t.name)
            for t in category.translations
        ],
    )


class CategoryService:
    """Application service for item categories."""

    def __init__(self, session: AsyncSession, request_id: str | None = None) -> None:
        """Initialize service.

        Args:
            session: Database session.
            request_id: Request ID for correlation.
        """
        self.category_repo = CategoryRepository(session)
        self.languages = LanguageService(session, request_id=request_id)
        self.request_id = request_id

    async def list_categories(self, language_code: str) -> list[CategoryDTO]:
        """List categories in a language.

        Raises:
            LanguageNotFoundError: If the code is unknown.
        """
        await self.languages.require_code(language_code)
        rows = await self.category_repo.find_by_language(language_code)
        return [CategoryDTO(id=category_id, name=name) for category_id, name in rows]

    async def get_category(self, category_id: int, language_code: str) -> CategoryDTO:
        """Get a category in a language.

        Raises:
            LanguageNotFoundError: If the code is unknown.
            CategoryNotFoundError: If the category has no translation in that language.
        """
        await self.languages.require_code(language_code)
        category = await self.require(category_id)

        for translation in category.translations:
            if translation.language_code == language_code:
                return CategoryDTO(id=category.id, name=translation.name)
        raise CategoryNotFoundError(category_id)

    async def create_category(
        self,
        translations: list[CategoryTranslationDTO],
    ) -> CategoryDetailDTO:
        """Create a category named in every required language.

        Raises:
            RequiredLanguageError: If the translations do not cover every language.
            InvalidLanguageCodeError: If a code is unknown or repeated.
            CategoryExistsError: If a name is already used in its language.
        """
        validate_language_codes(t.language_code for t in translations)
        await self._check_names(translations)

        category = Category(
            translations=[
                CategoryTranslation(language_code=t.language_code, name=t.name)
                for t in translations
            ]
        )
        await self.category_repo.save(category)

        logger.info("Category created", category_id=category.id, request_id=self.request_id)
        return _to_detail(category)

    async def update_category(
        self,
        category_id: int,
        translations: list[CategoryTranslationDTO],
    ) -> CategoryDetailDTO:
        """Replace the names of a category, inserting missing translations.

        Raises:
            CategoryNotFoundError: If the category does not exist.
            CategoryExistsError: If a name is used by another category.
        """
        category = await self.require(category_id)
        validate_language_codes(t.language_code for t in translations)
        await self._check_names(translations, exclude_id=category_id)

        existing = {t.language_code: t for t in category.translations}
        for translation in translations:
            current = existing.get(translation.language_code)
            if current is None:
                category.translations.append(
                    CategoryTranslation(
                        language_code=translation.language_code,
                        name=translation.name,
                    )
                )
            else:
                current.name = translation.name

        await self.category_repo.save(category)

        logger.info("Category updated", category_id=category_id, request_id=self.request_id)
        return _to_detail(category)

    async def delete_category(self, category_id: int) -> None:
        """Delete a category that no item references.

        Raises:
            CategoryNotFoundError: If the category does not exist.
            CategoryInUseError: If items still belong to it.
        """
        category = await self.require(category_id)

        item_count = await self.category_repo.count_items(category_id)
        if item_count:
            raise CategoryInUseError(category_id, item_count)

        await self.category_repo.delete(category)
        logger.info("Category deleted", category_id=category_id, request_id=self.request_id)

    async def require(self, category_id: int) -> Category:
        """Get a category by id.

        Raises:
            CategoryNotFoundError: If the category does not exist.
        """
        category = await self.category_repo.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    async def _check_names(
        self,
        translations: list[CategoryTranslationDTO],
        exclude_id: int | None = None,
    ) -> None:
        for translation in translations:
            if await self.category_repo.name_exists(
                translation.name, translation.language_code, exclude_id=exclude_id
            ):
                raise CategoryExistsError(translation.name, translation.language_code)


def get_category_service(session: AsyncSession, request_id: str | None = None) -> CategoryService:
    """Get category service instance."""
    return CategoryService(session, request_id=request_id)
