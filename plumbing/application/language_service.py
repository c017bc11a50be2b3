"""Language application service.

Resolves language codes and ids for every localized read and write.
"""

from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.domain.exceptions import LanguageNotFoundError
from plumbing.infrastructure.models import Language
from plumbing.repositories.language import LanguageRepository


class LanguageService:
    """Application service for supported languages."""

    def __init__(self, session: AsyncSession, request_id: str | None = None) -> None:
        """Initialize service.

        Args:
            session: Database session.
            request_id: Request ID for correlation.
        """
        self.language_repo = LanguageRepository(session)
        self.request_id = request_id

    async def list_languages(self) -> Sequence[Language]:
        """Get every supported language."""
        return await self.language_repo.list_all()

    async def require_code(self, code: str) -> Language:
        """Get a language by code.

        Raises:
            LanguageNotFoundError: If the code is unknown.
        """
        language = await self.language_repo.get_by_code(code)
        if language is None:
            raise LanguageNotFoundError(code, field="code")
        return language

    async def require_id(self, language_id: int) -> Language:
        """Get a language by id.

        Raises:
            LanguageNotFoundError: If the id is unknown.
        """
        language = await self.language_repo.get_by_id(language_id)
        if language is None:
            raise LanguageNotFoundError(language_id)
        return language


def get_language_service(session: AsyncSession, request_id: str | None = None) -> LanguageService:
    """Get language service instance."""
    return LanguageService(session, request_id=request_id)
