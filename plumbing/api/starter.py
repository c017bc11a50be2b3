"""Starter data endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.api.schemas import ErrorResponse, StarterResponse
from plumbing.application.starter_service import StarterService, get_starter_service
from plumbing.infrastructure.database import get_session

router = APIRouter(prefix="/api", tags=["Starter"])


def get_service(request: Request, session: AsyncSession = Depends(get_session)) -> StarterService:
    """Get starter service with request ID."""
    return get_starter_service(session, request_id=getattr(request.state, "request_id", None))


@router.post(
    "/starter",
    response_model=StarterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="Seed demo data",
    description="Insert demo categories, collections and items into an empty catalog.",
)
async def seed_starter(
    service: Annotated[StarterService, Depends(get_service)],
) -> StarterResponse:
    """Seed demo data."""
    counts = await service.seed()
    return StarterResponse(message="Successful create starter", **counts)
