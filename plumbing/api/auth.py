"""Authentication endpoints.

- POST /api/register - create an administrator
- POST /api/login - exchange credentials for an access token
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from plumbing.api.schemas import CredentialsRequest, ErrorResponse, MessageResponse, TokenResponse
from plumbing.application.auth_service import AuthService, get_auth_service
from plumbing.infrastructure.database import get_session

router = APIRouter(prefix="/api", tags=["Auth"])


def get_service(request: Request, session: AsyncSession = Depends(get_session)) -> AuthService:
    """Get auth service with request ID."""
    return get_auth_service(session, request_id=getattr(request.state, "request_id", None))


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Register administrator",
)
async def register(
    body: CredentialsRequest,
    service: Annotated[AuthService, Depends(get_service)],
) -> MessageResponse:
    """Create an administrator account."""
    await service.register(body.username, body.password)
    return MessageResponse(message="Successful register")


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Log in",
    description="Exchange credentials for a bearer token used by mutating endpoints.",
)
async def login(
    body: CredentialsRequest,
    service: Annotated[AuthService, Depends(get_service)],
) -> TokenResponse:
    """Issue an access token."""
    return TokenResponse(token=await service.login(body.username, body.password))
