"""Language endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.api.schemas import LanguageResponse
from plumbing.application.language_service import LanguageService, get_language_service
from plumbing.infrastructure.database import get_session

router = APIRouter(prefix="/api/languages", tags=["Languages"])


def get_service(request: Request, session: AsyncSession = Depends(get_session)) -> LanguageService:
    """Get language service with request ID."""
    return get_language_service(session, request_id=getattr(request.state, "request_id", None))


@router.get("", response_model=list[LanguageResponse], summary="List languages")
async def list_languages(
    service: Annotated[LanguageService, Depends(get_service)],
) -> list[LanguageResponse]:
    """List supported content languages."""
    return [LanguageResponse.model_validate(lang) for lang in await service.list_languages()]
