"""Stored image endpoint."""

from fastapi import APIRouter
from fastapi.responses import FileResponse

from plumbing.api.schemas import ErrorResponse
from plumbing.infrastructure.media import get_media_storage

router = APIRouter(tags=["Media"])


@router.get(
    "/media/images/{name}",
    response_class=FileResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get stored image",
)
async def get_image(name: str) -> FileResponse:
    """Serve an uploaded image by file name."""
    return FileResponse(get_media_storage().path_for(name))
