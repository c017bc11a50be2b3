"""Collection API endpoints.

Provides endpoints for collection management:
- GET /api/collections - collections in one language
- GET /api/collections/popular|new|producers|painted - filtered listings
- GET /api/collections/recommendations - random picks, popular first
- GET /api/collections/search - search by name, flags and price
- GET /api/collections/admin/{id} - collection with every translation
- GET /api/collections/{id} - one collection
- POST /api/collections - multipart create with photos
- PUT /api/collections/{id} - multipart partial update
- DELETE /api/collections/{id} - delete with items and photos
"""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.api.schemas import (
    CollectionDetailResponse,
    CollectionPayload,
    CollectionResponse,
    ErrorResponse,
    MessageResponse,
)
from plumbing.api.uploads import parse_payload, photo_uploads
from plumbing.application.collection_service import (
    CollectionDTO,
    CollectionInput,
    CollectionService,
    TranslationInput,
    get_collection_service,
)
from plumbing.domain.localization import DEFAULT_LANGUAGE
from plumbing.infrastructure.database import get_session
from plumbing.repositories.filters import ListingFilter

router = APIRouter(prefix="/api/collections", tags=["Collections"])


# ============================================================================
# Dependencies
# ============================================================================


def get_service(
    request: Request,
    session: AsyncSession = Depends(get_session),
) -> CollectionService:
    """Get collection service with request ID."""
    return get_collection_service(session, request_id=getattr(request.state, "request_id", None))


def search_filter(
    q: str | None = Query(default=None, description="Substring of the name"),
    is_producer: bool | None = Query(default=None),
    is_painted: bool | None = Query(default=None),
    min_price: float | None = Query(default=None, alias="min", ge=0),
    max_price: float | None = Query(default=None, alias="max", ge=0),
) -> ListingFilter:
    """Build a listing filter from search query parameters."""
    return ListingFilter(
        search=q,
        is_producer=is_producer,
        is_painted=is_painted,
        min_price=min_price,
        max_price=max_price,
    )


# ============================================================================
# Converters
# ============================================================================


def payload_to_input(payload: CollectionPayload) -> CollectionInput:
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

    return CollectionInput(
        price=payload.price,
        is_producer=payload.is_producer,
        is_painted=payload.is_painted,
        is_popular=payload.is_popular,
        is_new=payload.is_new,
        translations=translations,
    )


def to_responses(collections: list[CollectionDTO]) -> list[CollectionResponse]:
    """Convert collection DTOs to responses."""
    return [CollectionResponse.model_validate(c) for c in collections]


# ============================================================================
# Listings
# ============================================================================


@router.get(
    "",
    response_model=list[CollectionResponse],
    responses={404: {"model": ErrorResponse}},
    summary="List collections",
)
async def list_collections(
    service: Annotated[CollectionService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE, description="Language code"),
) -> list[CollectionResponse]:
    """List every collection in a language."""
    return to_responses(await service.list_collections(lang))


@router.get("/popular", response_model=list[CollectionResponse], summary="Popular collections")
async def list_popular(
    service: Annotated[CollectionService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> list[CollectionResponse]:
    """List popular collections."""
    return to_responses(await service.list_collections(lang, ListingFilter(is_popular=True)))


@router.get("/new", response_model=list[CollectionResponse], summary="New collections")
async def list_new(
    service: Annotated[CollectionService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> list[CollectionResponse]:
    """List new collections."""
    return to_responses(await service.list_collections(lang, ListingFilter(is_new=True)))


@router.get(
    "/producers",
    response_model=list[CollectionResponse],
    summary="Own production collections",
)
async def list_producers(
    service: Annotated[CollectionService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> list[CollectionResponse]:
    """List collections made by the store's own production."""
    return to_responses(await service.list_collections(lang, ListingFilter(is_producer=True)))


@router.get("/painted", response_model=list[CollectionResponse], summary="Painted collections")
async def list_painted(
    service: Annotated[CollectionService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> list[CollectionResponse]:
    """List painted collections."""
    return to_responses(await service.list_collections(lang, ListingFilter(is_painted=True)))


@router.get(
    "/recommendations",
    response_model=list[CollectionResponse],
    summary="Recommended collections",
    description="Up to seven random collections, popular ones first.",
)
async def recommend(
    service: Annotated[CollectionService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> list[CollectionResponse]:
    """Recommend collections."""
    return to_responses(await service.recommend_collections(lang))


@router.get(
    "/search",
    response_model=list[CollectionResponse],
    responses={404: {"model": ErrorResponse}},
    summary="Search collections",
)
async def search(
    service: Annotated[CollectionService, Depends(get_service)],
    listing_filter: Annotated[ListingFilter, Depends(search_filter)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> list[CollectionResponse]:
    """Search collections by name, flags and price range."""
    return to_responses(await service.search_collections(lang, listing_filter))


@router.get(
    "/admin/{collection_id}",
    response_model=CollectionDetailResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get collection with every translation",
)
async def get_collection_detail(
    collection_id: int,
    service: Annotated[CollectionService, Depends(get_service)],
) -> CollectionDetailResponse:
    """Get a collection for the admin form."""
    return CollectionDetailResponse.model_validate(
        await service.get_collection_detail(collection_id)
    )


@router.get(
    "/{collection_id}",
    response_model=CollectionResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get collection",
)
async def get_collection(
    collection_id: int,
    service: Annotated[CollectionService, Depends(get_service)],
    lang: str = Query(default=DEFAULT_LANGUAGE),
) -> CollectionResponse:
    """Get a collection in a language."""
    return CollectionResponse.model_validate(await service.get_collection(collection_id, lang))


# ============================================================================
# Mutations
# ============================================================================


@router.post(
    "",
    response_model=CollectionDetailResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="Create collection",
    description=(
        "Multipart request: a `collection` JSON field and `photos` files. "
        "Per-file options go in `is_main_<filename>` and `hash_color_<filename>` fields."
    ),
)
async def create_collection(
    request: Request,
    service: Annotated[CollectionService, Depends(get_service)],
    collection: str = Form(..., description="Collection JSON document"),
    photos: list[UploadFile] | None = File(default=None),
) -> CollectionDetailResponse:
    """Create a collection with photos."""
    payload = parse_payload(CollectionPayload, collection, "collection")
    detail = await service.create_collection(
        payload_to_input(payload),
        await photo_uploads(request, photos),
    )
    return CollectionDetailResponse.model_validate(detail)


@router.put(
    "/{collection_id}",
    response_model=CollectionDetailResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update collection",
    description="Omitted fields keep their values. New photos are appended.",
)
async def update_collection(
    collection_id: int,
    request: Request,
    service: Annotated[CollectionService, Depends(get_service)],
    collection: str = Form(default="{}", description="Collection JSON document"),
    photos: list[UploadFile] | None = File(default=None),
) -> CollectionDetailResponse:
    """Update a collection."""
    payload = parse_payload(CollectionPayload, collection, "collection")
    detail = await service.update_collection(
        collection_id,
        payload_to_input(payload),
        await photo_uploads(request, photos),
    )
    return CollectionDetailResponse.model_validate(detail)


@router.delete(
    "/{collection_id}",
    response_model=MessageResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete collection",
)
async def delete_collection(
    collection_id: int,
    service: Annotated[CollectionService, Depends(get_service)],
) -> MessageResponse:
    """Delete a collection with its items and photos."""
    await service.delete_collection(collection_id)
    return MessageResponse(message="Successful remove collection")
