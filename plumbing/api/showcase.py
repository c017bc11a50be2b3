"""Showcase endpoints combining collections and items.

- GET /api/popular
- GET /api/new
- GET /api/search
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.api.collections import search_filter
from plumbing.api.schemas import ErrorResponse, ShowcaseResponse
from plumbing.application.showcase_service import ShowcaseService, get_showcase_service
from plumbing.domain.localization import DEFAULT_LANGUAGE
from plumbing.infrastructure.database import get_session
from plumbing.repositories.filters import ListingFilter

router = APIRouter(prefix="/api", tags=["Showcase"])


def get_service(request: Request, session: AsyncSession = Depends(get_session)) -> ShowcaseService:
    """Get showcase service with request ID."""
    return get_showcase_service(session, request_id=getattr(request.state, "request_id", None))


@router.get("/popular", response_model=ShowcaseResponse, summary="Popular collections and items")
async def popular(
    service: Annotated[ShowcaseService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> ShowcaseResponse:
    """List popular collections and items."""
    return ShowcaseResponse.model_validate(await service.popular(lang))


@router.get("/new", response_model=ShowcaseResponse, summary="New collections and items")
async def new(
    service: Annotated[ShowcaseService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> ShowcaseResponse:
    """List new collections and items."""
    return ShowcaseResponse.model_validate(await service.new(lang))


@router.get(
    "/search",
    response_model=ShowcaseResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Search collections and items",
    description="Responds 404 only when neither collections nor items match.",
)
async def search(
    service: Annotated[ShowcaseService, Depends(get_service)],
    listing_filter: Annotated[ListingFilter, Depends(search_filter)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> ShowcaseResponse:
    """Search collections and items together."""
    return ShowcaseResponse.model_validate(await service.search(lang, listing_filter))
