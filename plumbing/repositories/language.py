"""Language repository."""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.infrastructure.models import Language


class LanguageRepository:
    """Repository for Language lookups."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def list_all(self) -> Sequence[Language]:
        """Get every language ordered by id."""
        result = await self.session.execute(select(Language).order_by(Language.id))
        return result.scalars().all()

    async def get_by_id(self, language_id: int) -> Language | None:
        """Get language by surrogate id."""
        return await self.session.get(Language, language_id)

    async def get_by_code(self, code: str) -> Language | None:
        """Get language by its code."""
        result = await self.session.execute(select(Language).where(Language.code == code))
        return result.scalar_one_or_none()

    async def save_all(self, languages: list[Language]) -> list[Language]:
        """Save multiple languages."""
        self.session.add_all(languages)
        await self.session.flush()
        return languages
