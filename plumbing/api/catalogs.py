"""Catalog API endpoints.

Provides endpoints for catalog management:
- POST /api/catalogs - create a catalog with its first localization
- POST /api/catalogs/{id}/localizations - add a localization
- GET /api/catalogs?lang= - catalogs in one language
- GET /api/catalogs/{id} - catalog grouped by language
- PUT /api/catalogs/{id} - update price and one localization
- DELETE /api/catalogs/{id} - delete a catalog
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.api.schemas import (
    CatalogCreateRequest,
    CatalogDetailResponse,
    CatalogLocalizationRequest,
    CatalogSummaryResponse,
    CatalogUpdateRequest,
    ErrorResponse,
    MessageResponse,
)
from plumbing.application.catalog_service import (
    CatalogService,
    ColorInput,
    get_catalog_service,
)
from plumbing.domain.localization import DEFAULT_LANGUAGE
from plumbing.infrastructure.database import get_session

router = APIRouter(prefix="/api/catalogs", tags=["Catalogs"])


# ============================================================================
# Dependencies
# ============================================================================


def get_service(request: Request, session: AsyncSession = Depends(get_session)) -> CatalogService:
    """Get catalog service with request ID."""
    return get_catalog_service(session, request_id=getattr(request.state, "request_id", None))


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "",
    response_model=CatalogDetailResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Create catalog",
    description="Create a catalog with one localization. Identical colors are reused.",
)
async def create_catalog(
    body: CatalogCreateRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> CatalogDetailResponse:
    """Create a catalog."""
    detail = await service.create_catalog(
        price=body.price,
        language_id=body.language_id,
        name=body.name,
        description=body.description,
        colors=[ColorInput(name=c.name, hash_color=c.hash_color) for c in body.colors],
    )
    return CatalogDetailResponse.model_validate(detail)


@router.post(
    "/{catalog_id}/localizations",
    response_model=CatalogDetailResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Add catalog localization",
)
async def add_localization(
    catalog_id: int,
    body: CatalogLocalizationRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> CatalogDetailResponse:
    """Add a localization to a catalog."""
    detail = await service.add_localization(
        catalog_id,
        language_id=body.language_id,
        name=body.name,
        description=body.description,
    )
    return CatalogDetailResponse.model_validate(detail)


@router.get(
    "",
    response_model=list[CatalogSummaryResponse],
    responses={404: {"model": ErrorResponse}},
    summary="List catalogs",
)
async def list_catalogs(
    service: Annotated[CatalogService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE, description="Language code"),
) -> list[CatalogSummaryResponse]:
    """List catalogs localized in a language."""
    return [CatalogSummaryResponse.model_validate(c) for c in await service.list_catalogs(lang)]


@router.get(
    "/{catalog_id}",
    response_model=CatalogDetailResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get catalog",
    description="Get a catalog with each localization and its colors, grouped by language.",
)
async def get_catalog(
    catalog_id: int,
    service: Annotated[CatalogService, Depends(get_service)],
) -> CatalogDetailResponse:
    """Get a catalog by ID."""
    return CatalogDetailResponse.model_validate(await service.get_catalog(catalog_id))


@router.put(
    "/{catalog_id}",
    response_model=CatalogDetailResponse,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update catalog",
)
async def update_catalog(
    catalog_id: int,
    body: CatalogUpdateRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> CatalogDetailResponse:
    """Update the price and the localization in one language."""
    detail = await service.update_catalog(
        catalog_id,
        price=body.price,
        language_id=body.language_id,
        name=body.name,
        description=body.description,
    )
    return CatalogDetailResponse.model_validate(detail)


@router.delete(
    "/{catalog_id}",
    response_model=MessageResponse,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Delete catalog",
)
async def delete_catalog(
    catalog_id: int,
    service: Annotated[CatalogService, Depends(get_service)],
) -> MessageResponse:
    """Delete a catalog with its localizations and color links."""
    await service.delete_catalog(catalog_id)
    return MessageResponse(message="Successful remove catalog")
