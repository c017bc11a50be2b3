"""Vacancy API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.api.schemas import (
    ErrorResponse,
    MessageResponse,
    VacancyEntryResponse,
    VacancyRequest,
    VacancyResponse,
)
from plumbing.application.vacancy_service import (
    VacancyService,
    VacancyTranslationDTO,
    get_vacancy_service,
)
from plumbing.domain.localization import DEFAULT_LANGUAGE
from plumbing.infrastructure.database import get_session

router = APIRouter(prefix="/api/vacancies", tags=["Vacancies"])


def get_service(request: Request, session: AsyncSession = Depends(get_session)) -> VacancyService:
    """Get vacancy service with request ID."""
    return get_vacancy_service(session, request_id=getattr(request.state, "request_id", None))


def _translations(body: VacancyRequest) -> list[VacancyTranslationDTO]:
    return [
        VacancyTranslationDTO(
            language_code=t.language_code,
            title=t.title,
            requirements=t.requirements,
            responsibilities=t.responsibilities,
            conditions=t.conditions,
            information=t.information,
        )
        for t in body.translations
    ]


@router.get(
    "",
    response_model=list[VacancyEntryResponse],
    responses={404: {"model": ErrorResponse}},
    summary="List vacancies",
)
async def list_vacancies(
    service: Annotated[VacancyService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> list[VacancyEntryResponse]:
    """List every vacancy in a language."""
    return [VacancyEntryResponse.model_validate(v) for v in await service.list_vacancies(lang)]


@router.get(
    "/active",
    response_model=list[VacancyEntryResponse],
    responses={404: {"model": ErrorResponse}},
    summary="List active vacancies",
)
async def list_active(
    service: Annotated[VacancyService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> list[VacancyEntryResponse]:
    """List published vacancies in a language."""
    vacancies = await service.list_vacancies(lang, active_only=True)
    return [VacancyEntryResponse.model_validate(v) for v in vacancies]


@router.get(
    "/search",
    response_model=list[VacancyEntryResponse],
    responses={404: {"model": ErrorResponse}},
    summary="Search vacancies",
)
async def search(
    service: Annotated[VacancyService, Depends(get_service)],
    q: str = Query(..., min_length=1, description="Substring of the title"),
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> list[VacancyEntryResponse]:
    """Search vacancies by title."""
    return [VacancyEntryResponse.model_validate(v) for v in await service.search_vacancies(q, lang)]


@router.get(
    "/{vacancy_id}",
    response_model=VacancyResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get vacancy",
)
async def get_vacancy(
    vacancy_id: int,
    service: Annotated[VacancyService, Depends(get_service)],
) -> VacancyResponse:
    """Get a vacancy with every translation."""
    return VacancyResponse.model_validate(await service.get_vacancy(vacancy_id))


@router.post(
    "",
    response_model=VacancyResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="Create vacancy",
)
async def create_vacancy(
    body: VacancyRequest,
    service: Annotated[VacancyService, Depends(get_service)],
) -> VacancyResponse:
    """Create a vacancy written in every supported language."""
    vacancy = await service.create_vacancy(body.salary, body.is_active, _translations(body))
    return VacancyResponse.model_validate(vacancy)


@router.put(
    "/{vacancy_id}",
    response_model=VacancyResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update vacancy",
)
async def update_vacancy(
    vacancy_id: int,
    body: VacancyRequest,
    service: Annotated[VacancyService, Depends(get_service)],
) -> VacancyResponse:
    """Update a vacancy."""
    vacancy = await service.update_vacancy(
        vacancy_id, body.salary, body.is_active, _translations(body)
    )
    return VacancyResponse.model_validate(vacancy)


@router.delete(
    "/{vacancy_id}",
    response_model=MessageResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete vacancy",
)
async def delete_vacancy(
    vacancy_id: int,
    service: Annotated[VacancyService, Depends(get_service)],
) -> MessageResponse:
    """Delete a vacancy."""
    await service.delete_vacancy(vacancy_id)
    return MessageResponse(message="Successful remove vacancy")
