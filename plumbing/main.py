"""Plumbing catalog API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, exception handlers and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from plumbing.api import (
    auth_router,
    brands_router,
    catalogs_router,
    categories_router,
    collections_router,
    discounts_router,
    health_router,
    items_router,
    languages_router,
    media_router,
    reviews_router,
    showcase_router,
    starter_router,
    vacancies_router,
)
from plumbing.api.middleware import error_envelope, setup_middleware
from plumbing.domain.exceptions import DomainError
from plumbing.infrastructure.config import settings
from plumbing.infrastructure.database import engine
from plumbing.infrastructure.logging_config import configure_logging

configure_logging(settings)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    logger.info(
        "Starting plumbing API",
        version=settings.api_version,
        env=settings.env,
        debug=settings.debug,
        base_url=settings.base_url,
    )

    yield

    logger.info("Shutting down plumbing API")
    await engine.dispose()


app = FastAPI(
    title="Plumbing Catalog API",
    description="Catalog, showcase and content backend for a plumbing store",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request ID, token auth, error handling
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(auth_router)
app.include_router(languages_router)
app.include_router(catalogs_router)
app.include_router(categories_router)
app.include_router(collections_router)
app.include_router(items_router)
app.include_router(showcase_router)
app.include_router(brands_router)
app.include_router(vacancies_router)
app.include_router(reviews_router)
app.include_router(discounts_router)
app.include_router(starter_router)
app.include_router(media_router)


# ============================================================================
# Exception Handlers
# ============================================================================

HTTP_ERROR_CODES = {
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map domain errors to their HTTP status."""
    logger.info("Domain error", error_code=exc.error_code, status_code=exc.status_code)
    return error_envelope(request, exc.status_code, exc.error_code, exc.message, exc.details)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return error_envelope(
        request,
        exc.status_code,
        HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
        str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Report each invalid field as {field, message}."""
    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body") or None,
            "message": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
    return error_envelope(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        "Request validation failed",
        details,
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Handler failed", method=request.method, path=request.url.path)
    return error_envelope(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "Internal server error",
    )
