"""Discount API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.api.schemas import (
    ActiveDiscountResponse,
    DiscountCreateRequest,
    DiscountResponse,
    ErrorResponse,
    MessageResponse,
)
from plumbing.application.discount_service import DiscountService, get_discount_service
from plumbing.domain.localization import DEFAULT_LANGUAGE
from plumbing.infrastructure.database import get_session

router = APIRouter(prefix="/api/discounts", tags=["Discounts"])


def get_service(request: Request, session: AsyncSession = Depends(get_session)) -> DiscountService:
    """Get discount service with request ID."""
    return get_discount_service(session, request_id=getattr(request.state, "request_id", None))


@router.post(
    "",
    response_model=DiscountResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Create discount",
    description="A target can carry only one discount that has not ended yet.",
)
async def create_discount(
    body: DiscountCreateRequest,
    service: Annotated[DiscountService, Depends(get_service)],
) -> DiscountResponse:
    """Create a discount on a collection or an item."""
    discount = await service.create_discount(
        discount_type=body.discount_type,
        target_id=body.target_id,
        discount_percentage=body.discount_percentage,
        start_date=body.start_date,
        end_date=body.end_date,
    )
    return DiscountResponse.model_validate(discount)


@router.get(
    "",
    response_model=list[ActiveDiscountResponse],
    responses={404: {"model": ErrorResponse}},
    summary="List active discounts",
    description="Active discounts with the discounted record, its old and new price.",
)
async def list_active(
    service: Annotated[DiscountService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> list[ActiveDiscountResponse]:
    """List active discounts in a language."""
    return [ActiveDiscountResponse.model_validate(d) for d in await service.list_active(lang)]


@router.delete(
    "/{discount_id}",
    response_model=MessageResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete discount",
)
async def delete_discount(
    discount_id: int,
    service: Annotated[DiscountService, Depends(get_service)],
) -> MessageResponse:
    """Delete a discount."""
    await service.delete_discount(discount_id)
    return MessageResponse(message="Successful remove discount")
