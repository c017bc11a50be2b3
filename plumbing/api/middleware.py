"""HTTP middleware: request correlation, bearer tokens and a last-resort
error envelope for anything the exception handlers did not catch."""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from plumbing.application.auth_service import decode_access_token
from plumbing.domain.exceptions import PermissionDeniedError

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


def error_envelope(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: list | dict | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a JSON error response in the shared envelope."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details if details is not None else [],
            "request_id": getattr(request.state, "request_id", None),
        },
        headers=headers,
    )


# ============================================================================
# Request Correlation
# ============================================================================


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log one line when it finishes.

    A client-supplied X-Request-ID is reused, otherwise a UUID4 is
    generated. The ID is stored on request.state, bound into the
    structlog context and echoed back on the response.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            logger.info(
                "Request handled",
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            structlog.contextvars.unbind_contextvars("request_id")


# ============================================================================
# Token Authentication Middleware
# ============================================================================


MUTATING_METHODS = {"POST", "PUT", "PATCH", "DELETE"}

# (method, path) pairs that mutate without a token
PUBLIC_WRITES = {
    ("POST", "/api/register"),
    ("POST", "/api/login"),
    ("POST", "/api/reviews"),
}

# Read-only paths that still require a token
PROTECTED_READS = {
    "/api/reviews/admin",
}


def requires_token(method: str, path: str) -> bool:
    """Decide whether a request must carry a bearer token.

    Args:
        method: HTTP method.
        path: Request path without a trailing slash.

    Returns:
        True if the request is protected.
    """
    if method in MUTATING_METHODS:
        return (method, path) not in PUBLIC_WRITES
    return path in PROTECTED_READS


def _unauthorized(request: Request, status_code: int, error_code: str, message: str) -> JSONResponse:
    return error_envelope(
        request, status_code, error_code, message, headers={"WWW-Authenticate": "Bearer"}
    )


class TokenAuthMiddleware(BaseHTTPMiddleware):
    """Require "Authorization: Bearer <jwt>" on protected requests.

    A missing or malformed header is answered with 401, a token that
    fails to decode or has expired with 403. The decoded payload is
    exposed to handlers as request.state.user.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path.rstrip("/") or "/"
        if not requires_token(request.method, path):
            return await call_next(request)

        header = request.headers.get("Authorization")
        if not header:
            logger.warning("Token missing", method=request.method, path=path)
            return _unauthorized(
                request, status.HTTP_401_UNAUTHORIZED, "UNAUTHORIZED", "Token required"
            )

        scheme, _, token = header.partition(" ")
        token = token.strip()
        if scheme.lower() != "bearer" or not token:
            logger.warning("Token malformed", method=request.method, path=path)
            return _unauthorized(
                request, status.HTTP_401_UNAUTHORIZED, "UNAUTHORIZED", "Invalid token format"
            )

        try:
            payload = decode_access_token(token)
        except PermissionDeniedError as e:
            logger.warning(
                "Token rejected",
                method=request.method,
                path=path,
                reason=e.details.get("reason"),
            )
            return _unauthorized(request, status.HTTP_403_FORBIDDEN, e.error_code, e.message)

        request.state.user = payload
        with structlog.contextvars.bound_contextvars(user=payload.username):
            return await call_next(request)



# ============================================================================
# Fallback Errors
# ============================================================================


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turn exceptions that escaped every handler into a 500 envelope."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Request failed", method=request.method, path=request.url.path)
            return error_envelope(
                request,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "INTERNAL_ERROR",
                "Internal server error",
            )


def setup_middleware(app: FastAPI) -> None:
    """Install middleware; the last one added runs first."""
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(TokenAuthMiddleware)
    app.add_middleware(RequestIdMiddleware)
