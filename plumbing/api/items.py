"""Item API endpoints.

Provides endpoints for item management:
- GET /api/items - every item with all translations
- GET /api/items/popular|new - filtered listings
- GET /api/items/search - search by name, flags and price
- GET /api/items/by-category/{id}, /api/items/by-collection/{id}
- GET /api/items/{id} and /api/items/{id}/recommendations
- POST /api/items, PUT /api/items/{id} - multipart with photos
- DELETE /api/items/{id}
"""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.api.collections import search_filter
from plumbing.api.schemas import (
    ErrorResponse,
    ItemDetailResponse,
    ItemPayload,
    ItemResponse,
    MessageResponse,
)
from plumbing.api.uploads import parse_payload, photo_uploads
from plumbing.application.collection_service import TranslationInput
from plumbing.application.item_service import ItemDTO, ItemInput, ItemService, get_item_service
from plumbing.domain.localization import DEFAULT_LANGUAGE
from plumbing.infrastructure.database import get_session
from plumbing.repositories.filters import ListingFilter

router = APIRouter(prefix="/api/items", tags=["Items"])


# ============================================================================
# Dependencies
# ============================================================================


def get_service(request: Request, session: AsyncSession = Depends(get_session)) -> ItemService:
    """Get item service with request ID."""
    return get_item_service(session, request_id=getattr(request.state, "request_id", None))


# ============================================================================
# Converters
# ============================================================================


def payload_to_input(payload: ItemPayload) -> ItemInput:
    """Convert the multipart JSON document to service input."""
    translations = None
    if payload.translations is not None:
        translations = [
            TranslationInput(
                language_code=t.language_code,
                name=t.name,
                description=t.description,
            )
            for t in payload.translations
        ]

    return ItemInput(
        category_id=payload.category_id,
        collection_id=payload.collection_id,
        size=payload.size,
        price=payload.price,
        is_producer=payload.is_producer,
        is_painted=payload.is_painted,
        is_popular=payload.is_popular,
        is_new=payload.is_new,
        translations=translations,
    )


def to_responses(items: list[ItemDTO]) -> list[ItemResponse]:
    """Convert item DTOs to responses."""
    return [ItemResponse.model_validate(item) for item in items]


# ============================================================================
# Listings
# ============================================================================


@router.get(
    "",
    response_model=list[ItemDetailResponse],
    summary="List items",
    description="Every item with all translations, for the admin panel.",
)
async def list_items(
    service: Annotated[ItemService, Depends(get_service)],
) -> list[ItemDetailResponse]:
    """List every item."""
    return [ItemDetailResponse.model_validate(item) for item in await service.list_all_items()]


@router.get("/popular", response_model=list[ItemResponse], summary="Popular items")
async def list_popular(
    service: Annotated[ItemService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> list[ItemResponse]:
    """List popular items."""
    return to_responses(await service.list_items(lang, ListingFilter(is_popular=True)))


@router.get("/new", response_model=list[ItemResponse], summary="New items")
async def list_new(
    service: Annotated[ItemService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> list[ItemResponse]:
    """List new items."""
    return to_responses(await service.list_items(lang, ListingFilter(is_new=True)))


@router.get(
    "/search",
    response_model=list[ItemResponse],
    responses={404: {"model": ErrorResponse}},
    summary="Search items",
)
async def search(
    service: Annotated[ItemService, Depends(get_service)],
    listing_filter: Annotated[ListingFilter, Depends(search_filter)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> list[ItemResponse]:
    """Search items by name, flags and price range."""
    return to_responses(await service.search_items(lang, listing_filter))


@router.get(
    "/by-category/{category_id}",
    response_model=list[ItemResponse],
    responses={404: {"model": ErrorResponse}},
    summary="Items of a category",
)
async def list_by_category(
    category_id: int,
    service: Annotated[ItemService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> list[ItemResponse]:
    """List items of a category."""
    return to_responses(await service.list_by_category(category_id, lang))


@router.get(
    "/by-collection/{collection_id}",
    response_model=list[ItemResponse],
    responses={404: {"model": ErrorResponse}},
    summary="Items of a collection",
)
async def list_by_collection(
    collection_id: int,
    service: Annotated[ItemService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> list[ItemResponse]:
    """List items of a collection."""
    return to_responses(await service.list_by_collection(collection_id, lang))


@router.get(
    "/{item_id}",
    response_model=ItemResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get item",
)
async def get_item(
    item_id: int,
    service: Annotated[ItemService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> ItemResponse:
    """Get an item in a language."""
    return ItemResponse.model_validate(await service.get_item(item_id, lang))


@router.get(
    "/{item_id}/recommendations",
    response_model=list[ItemResponse],
    responses={404: {"model": ErrorResponse}},
    summary="Recommended items",
    description="Up to seven random items of the same category, popular ones first.",
)
async def recommend(
    item_id: int,
    service: Annotated[ItemService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> list[ItemResponse]:
    """Recommend items similar to an item."""
    return to_responses(await service.recommend_items(item_id, lang))


# ============================================================================
# Mutations
# ============================================================================


@router.post(
    "",
    response_model=ItemDetailResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Create item",
    description=(
        "Multipart request: an `item` JSON field and `photos` files. "
        "Per-file options go in `is_main_<filename>` and `hash_color_<filename>` fields."
    ),
)
async def create_item(
    request: Request,
    service: Annotated[ItemService, Depends(get_service)],
    item: str = Form(..., description="Item JSON document"),
    photos: list[UploadFile] | None = File(default=None),
) -> ItemDetailResponse:
    """Create an item with photos."""
    payload = parse_payload(ItemPayload, item, "item")
    detail = await service.create_item(
        payload_to_input(payload),
        await photo_uploads(request, photos),
    )
    return ItemDetailResponse.model_validate(detail)


@router.put(
    "/{item_id}",
    response_model=ItemDetailResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update item",
    description="Omitted fields keep their values. New photos are appended.",
)
async def update_item(
    item_id: int,
    request: Request,
    service: Annotated[ItemService, Depends(get_service)],
    item: str = Form(default="{}", description="Item JSON document"),
    photos: list[UploadFile] | None = File(default=None),
) -> ItemDetailResponse:
    """Update an item."""
    payload = parse_payload(ItemPayload, item, "item")
    detail = await service.update_item(
        item_id,
        payload_to_input(payload),
        await photo_uploads(request, photos),
    )
    return ItemDetailResponse.model_validate(detail)


@router.delete(
    "/{item_id}",
    response_model=MessageResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete item",
)
async def delete_item(
    item_id: int,
    service: Annotated[ItemService, Depends(get_service)],
) -> MessageResponse:
    """Delete an item with its photos."""
    await service.delete_item(item_id)
    return MessageResponse(message="Successful remove item")
