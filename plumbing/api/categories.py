"""Category API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.api.schemas import (
    CategoryDetailResponse,
    CategoryRequest,
    CategoryResponse,
    ErrorResponse,
    MessageResponse,
)
from plumbing.application.category_service import (
    CategoryService,
    CategoryTranslationDTO,
    get_category_service,
)
from plumbing.domain.localization import DEFAULT_LANGUAGE
from plumbing.infrastructure.database import get_session

router = APIRouter(prefix="/api/categories", tags=["Categories"])


def get_service(request: Request, session: AsyncSession = Depends(get_session)) -> CategoryService:
    """Get category service with request ID."""
    return get_category_service(session, request_id=getattr(request.state, "request_id", None))


def _translations(body: CategoryRequest) -> list[CategoryTranslationDTO]:
    return [
        CategoryTranslationDTO(language_code=t.language_code, name=t.name)
        for t in body.translations
    ]


@router.get(
    "",
    response_model=list[CategoryResponse],
    responses={404: {"model": ErrorResponse}},
    summary="List categories",
)
async def list_categories(
    service: Annotated[CategoryService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE, description="Language code"),
) -> list[CategoryResponse]:
    """List categories in a language."""
    return [CategoryResponse.model_validate(c) for c in await service.list_categories(lang)]


@router.get(
    "/{category_id}",
    response_model=CategoryResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get category",
)
async def get_category(
    category_id: int,
    service: Annotated[CategoryService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE, description="Language code"),
) -> CategoryResponse:
    """Get a category in a language."""
    return CategoryResponse.model_validate(await service.get_category(category_id, lang))


@router.post(
    "",
    response_model=CategoryDetailResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="Create category",
    description="Create a category named in every supported language.",
)
async def create_category(
    body: CategoryRequest,
    service: Annotated[CategoryService, Depends(get_service)],
) -> CategoryDetailResponse:
    """Create a category."""
    return CategoryDetailResponse.model_validate(
        await service.create_category(_translations(body))
    )


@router.put(
    "/{category_id}",
    response_model=CategoryDetailResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update category",
)
async def update_category(
    category_id: int,
    body: CategoryRequest,
    service: Annotated[CategoryService, Depends(get_service)],
) -> CategoryDetailResponse:
    """Replace the names of a category."""
    return CategoryDetailResponse.model_validate(
        await service.update_category(category_id, _translations(body))
    )


@router.delete(
    "/{category_id}",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Delete category",
)
async def delete_category(
    category_id: int,
    service: Annotated[CategoryService, Depends(get_service)],
) -> MessageResponse:
    """Delete a category that no item uses."""
    await service.delete_category(category_id)
    return MessageResponse(message="Successful remove category")
