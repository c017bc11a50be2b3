"""Vacancy application service.

Vacancies are written in every supported language at once and read
either flat in one language or with all translations.
"""

from dataclasses import dataclass, field

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.application.language_service import LanguageService
from plumbing.domain.exceptions import VacancyNotFoundError
from plumbing.domain.localization import DEFAULT_LANGUAGE, validate_language_codes
from plumbing.infrastructure.models import Vacancy, VacancyTranslation
from plumbing.repositories.vacancy import VacancyRepository

logger = structlog.get_logger()


# ============================================================================
# Vacancy Data Transfer Objects
# ============================================================================


@dataclass
class VacancyTranslationDTO:
    """Vacancy text in one language."""

    language_code: str
    title: str
    requirements: list[str] = field(default_factory=list)
    responsibilities: list[str] = field(default_factory=list)
    conditions: list[str] = field(default_factory=list)
    information: list[str] = field(default_factory=list)


@dataclass
class VacancyDTO:
    """Vacancy with every translation."""

    id: int
    salary: int
    is_active: bool
    translations: list[VacancyTranslationDTO] = field(default_factory=list)


@dataclass
class VacancyEntryDTO:
    """Vacancy flattened into one language."""

    id: int
    salary: int
    is_active: bool
    language_code: str
    title: str
    requirements: list[str]
    responsibilities: list[str]
    conditions: list[str]
    information: list[str]


def _translation_dto(translation: VacancyTranslation) -> VacancyTranslationDTO:
    return VacancyTranslationDTO(
        language_code=translation.language_code,
        title=translation.title,
        requirements=list(translation.requirements or []),
        responsibilities=list(translation.responsibilities or []),
        conditions=list(translation.conditions or []),
        information=list(translation.information or []),
    )


def _to_dto(vacancy: Vacancy) -> VacancyDTO:
    return VacancyDTO(
        id=vacancy.id,
        salary=vacancy.salary,
        is_active=vacancy.is_active,
        translations=[_translation_dto(t) for t in vacancy.translations],
    )


def _to_entry(vacancy: Vacancy, translation: VacancyTranslation) -> VacancyEntryDTO:
    text = _translation_dto(translation)
    return VacancyEntryDTO(
        id=vacancy.id,
        salary=vacancy.salary,
        is_active=vacancy.is_active,
        language_code=text.language_code,
        title=text.title,
        requirements=text.requirements,
        responsibilities=text.responsibilities,
        conditions=text.conditions,
        information=text.information,
    )


# ============================================================================
# Vacancy Service
# ============================================================================


class VacancyService:
    """Application service for vacancies."""

    def __init__(self, session: AsyncSession, request_id: str | None = None) -> None:
        """Initialize service.

        Args:
            session: Database session.
            request_id: Request ID for correlation.
        """
        self.vacancy_repo = VacancyRepository(session)
        self.languages = LanguageService(session, request_id=request_id)
        self.request_id = request_id

    async def list_vacancies(
        self,
        language_code: str,
        active_only: bool = False,
    ) -> list[VacancyEntryDTO]:
        """List vacancies in a language.

        Args:
            language_code: Language code.
            active_only: Skip vacancies that are not published.

        Raises:
            LanguageNotFoundError: If the code is unknown.
        """
        await self.languages.require_code(language_code)
        rows = await self.vacancy_repo.find_by_language(
            language_code,
            is_active=True if active_only else None,
        )
        return [_to_entry(vacancy, translation) for vacancy, translation in rows]

    async def search_vacancies(
        self,
        query: str,
        language_code: str = DEFAULT_LANGUAGE,
    ) -> list[VacancyEntryDTO]:
        """Search vacancies by title.

        Raises:
            VacancyNotFoundError: If nothing matches.
        """
        await self.languages.require_code(language_code)
        rows = await self.vacancy_repo.find_by_language(language_code, search=query)
        if not rows:
            raise VacancyNotFoundError(query, field="q")
        return [_to_entry(vacancy, translation) for vacancy, translation in rows]

    async def get_vacancy(self, vacancy_id: int) -> VacancyDTO:
        """Get a vacancy with every translation.

        Raises:
            VacancyNotFoundError: If the vacancy does not exist.
        """
        return _to_dto(await self._require(vacancy_id))

    async def create_vacancy(
        self,
        salary: int,
        is_active: bool,
        translations: list[VacancyTranslationDTO],
    ) -> VacancyDTO:
        """Create a vacancy.

        Raises:
            RequiredLanguageError: If the translations do not cover every language.
            InvalidLanguageCodeError: If a code is unknown or repeated.
        """
        validate_language_codes(t.language_code for t in translations)

        vacancy = Vacancy(
            salary=salary,
            is_active=is_active,
            translations=[
                VacancyTranslation(
                    language_code=t.language_code,
                    title=t.title,
                    requirements=list(t.requirements),
                    responsibilities=list(t.responsibilities),
                    conditions=list(t.conditions),
                    information=list(t.information),
                )
                for t in translations
            ],
        )
        await self.vacancy_repo.save(vacancy)

        logger.info("Vacancy created", vacancy_id=vacancy.id, request_id=self.request_id)
        return _to_dto(vacancy)

    async def update_vacancy(
        self,
        vacancy_id: int,
        salary: int,
        is_active: bool,
        translations: list[VacancyTranslationDTO],
    ) -> VacancyDTO:
        """Update a vacancy, upserting translations by language code.

        Raises:
            VacancyNotFoundError: If the vacancy does not exist.
            RequiredLanguageError: If the translations do not cover every language.
        """
        vacancy = await self._require(vacancy_id)
        validate_language_codes(t.language_code for t in translations)

        vacancy.salary = salary
        vacancy.is_active = is_active

        existing = {t.language_code: t for t in vacancy.translations}
        for translation in translations:
            current = existing.get(translation.language_code)
            if current is None:
                current = VacancyTranslation(language_code=translation.language_code)
                vacancy.translations.append(current)
            current.title = translation.title
            current.requirements = list(translation.requirements)
            current.responsibilities = list(translation.responsibilities)
            current.conditions = list(translation.conditions)
            current.information = list(translation.information)

        await self.vacancy_repo.save(vacancy)

        logger.info("Vacancy updated", vacancy_id=vacancy_id, request_id=self.request_id)
        return _to_dto(vacancy)

    async def delete_vacancy(self, vacancy_id: int) -> None:
        """Delete a vacancy.

        Raises:
            VacancyNotFoundError: If the vacancy does not exist.
        """
        vacancy = await self._require(vacancy_id)
        await self.vacancy_repo.delete(vacancy)
        logger.info("Vacancy deleted", vacancy_id=vacancy_id, request_id=self.request_id)

    async def _require(self, vacancy_id: int) -> Vacancy:
        vacancy = await self.vacancy_repo.get_by_id(vacancy_id)
        if vacancy is None:
            raise VacancyNotFoundError(vacancy_id)
        return vacancy


def get_vacancy_service(session: AsyncSession, request_id: str | None = None) -> VacancyService:
    """Get vacancy service instance."""
    return VacancyService(session, request_id=request_id)
