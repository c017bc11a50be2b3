"""Brand API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.api.schemas import BrandResponse, ErrorResponse, MessageResponse
from plumbing.api.uploads import to_upload
from plumbing.application.brand_service import BrandService, get_brand_service
from plumbing.infrastructure.database import get_session

router = APIRouter(prefix="/api/brands", tags=["Brands"])


def get_service(request: Request, session: AsyncSession = Depends(get_session)) -> BrandService:
    """Get brand service with request ID."""
    return get_brand_service(session, request_id=getattr(request.state, "request_id", None))


@router.post(
    "",
    response_model=BrandResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="Create brand",
)
async def create_brand(
    service: Annotated[BrandService, Depends(get_service)],
    name: str = Form(..., min_length=1, max_length=255),
    photo: UploadFile = File(..., description="Brand logo"),
) -> BrandResponse:
    """Create a brand with its logo."""
    return BrandResponse.model_validate(await service.create_brand(name, to_upload(photo)))


@router.get("", response_model=list[BrandResponse], summary="List brands")
async def list_brands(
    service: Annotated[BrandService, Depends(get_service)],
) -> list[BrandResponse]:
    """List every brand."""
    return [BrandResponse.model_validate(b) for b in await service.list_brands()]


@router.get(
    "/{brand_id}",
    response_model=BrandResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get brand",
)
async def get_brand(
    brand_id: int,
    service: Annotated[BrandService, Depends(get_service)],
) -> BrandResponse:
    """Get a brand by ID."""
    return BrandResponse.model_validate(await service.get_brand(brand_id))


@router.put(
    "/{brand_id}",
    response_model=BrandResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update brand",
    description="Rename a brand. A new logo replaces the stored one.",
)
async def update_brand(
    brand_id: int,
    service: Annotated[BrandService, Depends(get_service)],
    name: str = Form(..., min_length=1, max_length=255),
    photo: UploadFile | None = File(default=None),
) -> BrandResponse:
    """Update a brand."""
    logo = to_upload(photo) if photo is not None else None
    return BrandResponse.model_validate(await service.update_brand(brand_id, name, logo))


@router.delete(
    "/{brand_id}",
    response_model=MessageResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete brand",
)
async def delete_brand(
    brand_id: int,
    service: Annotated[BrandService, Depends(get_service)],
) -> MessageResponse:
    """Delete a brand and its logo."""
    await service.delete_brand(brand_id)
    return MessageResponse(message="Successful remove brand")
