"""Review API endpoints.

Submitting a review is public; moderation requires a token.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.api.schemas import (
    ErrorResponse,
    MessageResponse,
    ReviewAdminResponse,
    ReviewCreateRequest,
    ReviewResponse,
)
from plumbing.application.review_service import ReviewService, get_review_service
from plumbing.infrastructure.database import get_session

router = APIRouter(prefix="/api/reviews", tags=["Reviews"])


def get_service(request: Request, session: AsyncSession = Depends(get_session)) -> ReviewService:
    """Get review service with request ID."""
    return get_review_service(session, request_id=getattr(request.state, "request_id", None))


@router.post(
    "",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit review",
)
async def create_review(
    body: ReviewCreateRequest,
    service: Annotated[ReviewService, Depends(get_service)],
) -> ReviewResponse:
    """Submit a customer review."""
    review = await service.create_review(body.username, body.rating, body.text)
    return ReviewResponse.model_validate(review)


@router.get("", response_model=list[ReviewResponse], summary="List visible reviews")
async def list_reviews(
    service: Annotated[ReviewService, Depends(get_service)],
) -> list[ReviewResponse]:
    """List visible reviews, newest first."""
    return [ReviewResponse.model_validate(r) for r in await service.list_visible()]


@router.get(
    "/admin",
    response_model=list[ReviewAdminResponse],
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
    summary="List every review",
)
async def list_all_reviews(
    service: Annotated[ReviewService, Depends(get_service)],
) -> list[ReviewAdminResponse]:
    """List every review with its visibility."""
    return [ReviewAdminResponse.model_validate(r) for r in await service.list_all()]


@router.post(
    "/{review_id}/toggle-visibility",
    response_model=ReviewAdminResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Toggle review visibility",
)
async def toggle_visibility(
    review_id: int,
    service: Annotated[ReviewService, Depends(get_service)],
) -> ReviewAdminResponse:
    """Show a hidden review or hide a visible one."""
    return ReviewAdminResponse.model_validate(await service.toggle_visibility(review_id))


@router.delete(
    "/{review_id}",
    response_model=MessageResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete review",
)
async def delete_review(
    review_id: int,
    service: Annotated[ReviewService, Depends(get_service)],
) -> MessageResponse:
    """Delete a review."""
    await service.delete_review(review_id)
    return MessageResponse(message="Successful remove review")
