"""API layer module.

Contains FastAPI routers, request/response schemas and middleware.
"""

from plumbing.api.auth import router as auth_router
from plumbing.api.brands import router as brands_router
from plumbing.api.catalogs import router as catalogs_router
from plumbing.api.categories import router as categories_router
from plumbing.api.collections import router as collections_router
from plumbing.api.discounts import router as discounts_router
from plumbing.api.health import router as health_router
from plumbing.api.items import router as items_router
from plumbing.api.languages import router as languages_router
from plumbing.api.media import router as media_router
from plumbing.api.reviews import router as reviews_router
from plumbing.api.showcase import router as showcase_router
from plumbing.api.starter import router as starter_router
from plumbing.api.vacancies import router as vacancies_router

__all__ = [
    "auth_router",
    "brands_router",
    "catalogs_router",
    "categories_router",
    "collections_router",
    "discounts_router",
    "health_router",
    "items_router",
    "languages_router",
    "media_router",
    "reviews_router",
    "showcase_router",
    "starter_router",
    "vacancies_router",
]
