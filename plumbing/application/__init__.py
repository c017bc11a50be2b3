"""Application layer module.

Contains application services (use cases) that validate requests,
orchestrate repositories and assemble response DTOs.
"""

from plumbing.application.auth_service import AuthService, get_auth_service
from plumbing.application.brand_service import BrandService, get_brand_service
from plumbing.application.catalog_service import CatalogService, get_catalog_service
from plumbing.application.category_service import CategoryService, get_category_service
from plumbing.application.collection_service import (
    CollectionService,
    get_collection_service,
)
from plumbing.application.discount_service import DiscountService, get_discount_service
from plumbing.application.item_service import ItemService, get_item_service
from plumbing.application.language_service import LanguageService, get_language_service
from plumbing.application.review_service import ReviewService, get_review_service
from plumbing.application.showcase_service import ShowcaseService, get_showcase_service
from plumbing.application.starter_service import StarterService, get_starter_service
from plumbing.application.vacancy_service import VacancyService, get_vacancy_service

__all__ = [
    "AuthService",
    "get_auth_service",
    "BrandService",
    "get_brand_service",
    "CatalogService",
    "get_catalog_service",
    "CategoryService",
    "get_category_service",
    "CollectionService",
    "get_collection_service",
    "DiscountService",
    "get_discount_service",
    "ItemService",
    "get_item_service",
    "LanguageService",
    "get_language_service",
    "ReviewService",
    "get_review_service",
    "ShowcaseService",
    "get_showcase_service",
    "StarterService",
    "get_starter_service",
    "VacancyService",
    "get_vacancy_service",
]
