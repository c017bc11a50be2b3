"""Database repositories, one per aggregate."""

from plumbing.repositories.brand import BrandRepository
from plumbing.repositories.catalog import CatalogRepository
from plumbing.repositories.category import CategoryRepository
from plumbing.repositories.collection import CollectionRepository
from plumbing.repositories.discount import DiscountRepository
from plumbing.repositories.filters import ListingFilter
from plumbing.repositories.item import ItemRepository
from plumbing.repositories.language import LanguageRepository
from plumbing.repositories.review import ReviewRepository
from plumbing.repositories.user import UserRepository
from plumbing.repositories.vacancy import VacancyRepository

__all__ = [
    "BrandRepository",
    "CatalogRepository",
    "CategoryRepository",
    "CollectionRepository",
    "DiscountRepository",
    "ItemRepository",
    "LanguageRepository",
    "ListingFilter",
    "ReviewRepository",
    "UserRepository",
    "VacancyRepository",
]
