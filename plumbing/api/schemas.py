"""API schemas for the plumbing catalog API.

Pydantic models for request/response validation and serialization.
Response models read service DTOs through ``from_attributes``.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from plumbing.domain.pricing import DiscountType

# ============================================================================
# Common Schemas
# ============================================================================


class ResponseModel(BaseModel):
    """Base for response schemas built from DTOs and ORM objects."""

    model_config = ConfigDict(from_attributes=True)


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] | dict[str, Any] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(default=None, description="Request ID for correlation")


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


# ============================================================================
# Auth Schemas
# ============================================================================


class CredentialsRequest(BaseModel):
    """Username and password."""

    username: str = Field(..., min_length=1, max_length=100, description="Username")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class TokenResponse(BaseModel):
    """Issued access token."""

    token: str = Field(..., description="Bearer token for mutating endpoints")


# ============================================================================
# Language Schemas
# ============================================================================


class LanguageResponse(ResponseModel):
    """Supported language."""

    code: str
    name: str


# ============================================================================
# Catalog Schemas
# ============================================================================


class ColorCreate(BaseModel):
    """Color submitted with a catalog."""

    name: str = Field(default="", max_length=100)
    hash_color: str = Field(..., min_length=1, max_length=20, description="Hex value")


class ColorSchema(ResponseModel):
    """Color of a catalog."""

    id: int
    name: str
    hash_color: str


class CatalogCreateRequest(BaseModel):
    """Request to create a catalog with its first localization."""

    price: float = Field(..., ge=0, description="Base price")
    language_id: int = Field(..., description="Language of the localization")
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="")
    colors: list[ColorCreate] = Field(default_factory=list)


class CatalogLocalizationRequest(BaseModel):
    """Request to add a localization to a catalog."""

    language_id: int
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="")


class CatalogUpdateRequest(CatalogLocalizationRequest):
    """Request to update the price and one localization of a catalog."""

    price: float = Field(..., ge=0)


class CatalogLanguageSchema(ResponseModel):
    """Catalog content in one language."""

    language_code: str
    name: str
    description: str
    colors: list[ColorSchema]


class CatalogDetailResponse(ResponseModel):
    """Catalog with every localization."""

    id: int
    price: float
    languages: list[CatalogLanguageSchema]


class CatalogSummaryResponse(ResponseModel):
    """Catalog in one language."""

    id: int
    price: float
    name: str
    description: str
    colors: list[ColorSchema]


# ============================================================================
# Category Schemas
# ============================================================================


class CategoryTranslationSchema(ResponseModel):
    """Category name in one language."""

    language_code: str = Field(..., min_length=1, max_length=10)
    name: str = Field(..., min_length=1, max_length=255)


class CategoryRequest(BaseModel):
    """Request to create or update a category."""

    translations: list[CategoryTranslationSchema]


class CategoryResponse(ResponseModel):
    """Category in one language."""

    id: int
    name: str


class CategoryDetailResponse(ResponseModel):
    """Category with every translation."""

    id: int
    translations: list[CategoryTranslationSchema]


# ============================================================================
# Collection & Item Schemas
# ============================================================================


class TranslationSchema(ResponseModel):
    """Name and description in one language."""

    language_code: str = Field(..., min_length=1, max_length=10)
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="")


class PhotoSchema(ResponseModel):
    """Photo with an absolute URL."""

    id: int
    url: str
    is_main: bool
    hash_color: str


class ColorTagSchema(ResponseModel):
    """Color shown on a photo."""

    hash_color: str


class CollectionPayload(BaseModel):
    """JSON part of a collection multipart request.

    On update, omitted fields keep their stored value.
    """

    price: float | None = Field(default=None, ge=0)
    is_producer: bool | None = None
    is_painted: bool | None = None
    is_popular: bool | None = None
    is_new: bool | None = None
    translations: list[TranslationSchema] | None = None


class ItemPayload(CollectionPayload):
    """JSON part of an item multipart request."""

    category_id: int | None = None
    collection_id: int | None = None
    size: str | None = Field(default=None, max_length=100)


class CollectionResponse(ResponseModel):
    """Collection in one language."""

    id: int
    name: str
    description: str
    price: float
    new_price: float
    is_producer: bool
    is_painted: bool
    is_popular: bool
    is_new: bool
    photos: list[PhotoSchema]
    colors: list[ColorTagSchema]


class CollectionDetailResponse(ResponseModel):
    """Collection with every translation."""

    id: int
    price: float
    is_producer: bool
    is_painted: bool
    is_popular: bool
    is_new: bool
    translations: list[TranslationSchema]
    photos: list[PhotoSchema]
    colors: list[ColorTagSchema]


class ItemResponse(CollectionResponse):
    """Item in one language."""

    category_id: int
    collection_id: int
    size: str


class ItemDetailResponse(CollectionDetailResponse):
    """Item with every translation."""

    category_id: int
    collection_id: int
    size: str


class ShowcaseResponse(ResponseModel):
    """Collections and items shown together."""

    collections: list[CollectionResponse]
    items: list[ItemResponse]


# ============================================================================
# Brand Schemas
# ============================================================================


class BrandResponse(ResponseModel):
    """Brand with the public URL of its logo."""

    id: int
    name: str
    photo: str


# ============================================================================
# Vacancy Schemas
# ============================================================================


class VacancyTranslationSchema(ResponseModel):
    """Vacancy text in one language."""

    language_code: str = Field(..., min_length=1, max_length=10)
    title: str = Field(..., min_length=1, max_length=255)
    requirements: list[str] = Field(default_factory=list)
    responsibilities: list[str] = Field(default_factory=list)
    conditions: list[str] = Field(default_factory=list)
    information: list[str] = Field(default_factory=list)


class VacancyRequest(BaseModel):
    """Request to create or update a vacancy."""

    salary: int = Field(default=0, ge=0)
    is_active: bool = True
    translations: list[VacancyTranslationSchema]


class VacancyResponse(ResponseModel):
    """Vacancy with every translation."""

    id: int
    salary: int
    is_active: bool
    translations: list[VacancyTranslationSchema]


class VacancyEntryResponse(ResponseModel):
    """Vacancy in one language."""

    id: int
    salary: int
    is_active: bool
    language_code: str
    title: str
    requirements: list[str]
    responsibilities: list[str]
    conditions: list[str]
    information: list[str]


# ============================================================================
# Review Schemas
# ============================================================================


class ReviewCreateRequest(BaseModel):
    """Review submitted by a customer."""

    username: str = Field(..., min_length=1, max_length=100)
    rating: int = Field(..., ge=1, le=5)
    text: str = Field(..., min_length=1)


class ReviewResponse(ResponseModel):
    """Published review."""

    id: int
    username: str
    rating: int
    text: str
    created_at: datetime


class ReviewAdminResponse(ReviewResponse):
    """Review with its visibility."""

    is_show: bool


# ============================================================================
# Discount Schemas
# ============================================================================


class DiscountCreateRequest(BaseModel):
    """Request to create a discount."""

    discount_type: DiscountType
    target_id: int
    discount_percentage: float = Field(..., gt=0, le=100)
    start_date: datetime
    end_date: datetime


class DiscountResponse(ResponseModel):
    """Discount on a collection or item."""

    id: int
    discount_type: DiscountType
    target_id: int
    discount_percentage: float
    start_date: datetime
    end_date: datetime


class ActiveDiscountResponse(DiscountResponse):
    """Active discount with the discounted record in one language."""

    name: str
    description: str
    is_producer: bool
    is_painted: bool
    is_popular: bool
    is_new: bool
    old_price: float
    new_price: float
    photos: list[PhotoSchema]
    colors: list[ColorTagSchema]


# ============================================================================
# Starter Schemas
# ============================================================================


class StarterResponse(BaseModel):
    """Result of seeding demo data."""

    message: str
    categories: int
    collections: int
    items: int
