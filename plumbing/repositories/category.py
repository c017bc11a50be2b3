"""Category repository for database operations."""

from collections.abc import Sequence

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.infrastructure.models import Category, CategoryTranslation, Item


class CategoryRepository:
    """Repository for Category database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, category: Category) -> Category:
        """Save a category with its translations."""
        self.session.add(category)
        await self.session.flush()
        return category

    async def get_by_id(self, category_id: int) -> Category | None:
        """Get category by ID with its translations."""
        result = await self.session.execute(select(Category).where(Category.id == category_id))
        return result.scalar_one_or_none()

    async def find_by_language(self, language_code: str) -> Sequence[tuple[int, str]]:
        """Find category names in a language.

        Args:
            language_code: Language code.

        Returns:
            Pairs of category id and localized name, ordered by id.
        """
        query = (
            select(CategoryTranslation.category_id, CategoryTranslation.name)
            .where(CategoryTranslation.language_code == language_code)
            .order_by(CategoryTranslation.category_id)
        )
        result = await self.session.execute(query)
        return [(row[0], row[1]) for row in result.all()]

    async def name_exists(
        self,
        name: str,
        language_code: str,
        exclude_id: int | None = None,
    ) -> bool:
        """Check whether a category name is taken in a language.

        Args:
            name: Localized name.
            language_code: Language code.
            exclude_id: Category to ignore, used on update.

        Returns:
            True if another category uses the name.
        """
        conditions = [
            CategoryTranslation.name == name,
            CategoryTranslation.language_code == language_code,
        ]
        if exclude_id is not None:
            conditions.append(CategoryTranslation.category_id != exclude_id)

        query = select(CategoryTranslation.category_id).where(and_(*conditions)).limit(1)
        result = await self.session.execute(query)
        return result.scalar_one_or_none() is not None

    async def count_items(self, category_id: int) -> int:
        """Count items that belong to a category."""
        query = select(func.count(Item.id)).where(Item.category_id == category_id)
        result = await self.session.execute(query)
        return result.scalar_one()

    async def count(self) -> int:
        """Count all categories."""
        result = await self.session.execute(select(func.count(Category.id)))
        return result.scalar_one()

    async def delete(self, category: Category) -> None:
        """Delete a category and its translations."""
        await self.session.delete(category)
        await self.session.flush()
