"""Vacancy repository for database operations."""

from collections.abc import Sequence

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.infrastructure.models import Vacancy, VacancyTranslation


class VacancyRepository:
    """Repository for Vacancy database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, vacancy: Vacancy) -> Vacancy:
        """Save a vacancy with its translations."""
        self.session.add(vacancy)
        await self.session.flush()
        return vacancy

    async def get_by_id(self, vacancy_id: int) -> Vacancy | None:
        """Get vacancy by ID with every translation."""
        result = await self.session.execute(select(Vacancy).where(Vacancy.id == vacancy_id))
        return result.scalar_one_or_none()

    async def find_by_language(
        self,
        language_code: str,
        is_active: bool | None = None,
        search: str | None = None,
    ) -> Sequence[tuple[Vacancy, VacancyTranslation]]:
        """Find vacancies translated into a language.

        Args:
            language_code: Language code.
            is_active: Filter by publication state.
            search: Case-insensitive substring of the title.

        Returns:
            Pairs of vacancy and its translation, ordered by id.
        """
        query = select(Vacancy, VacancyTranslation).join(
            VacancyTranslation,
            VacancyTranslation.vacancy_id == Vacancy.id,
        )

        conditions = [VacancyTranslation.language_code == language_code]

        if is_active is not None:
            conditions.append(Vacancy.is_active == is_active)

        if search:
            conditions.append(VacancyTranslation.title.ilike(f"%{search}%"))

        query = query.where(and_(*conditions)).order_by(Vacancy.id)
        result = await self.session.execute(query)
        return [(row[0], row[1]) for row in result.all()]

    async def delete(self, vacancy: Vacancy) -> None:
        """Delete a vacancy and its translations."""
        await self.session.delete(vacancy)
        await self.session.flush()
