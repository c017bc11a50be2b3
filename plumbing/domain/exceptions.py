"""Domain exceptions.

All domain-level errors raised by services and repositories. Each
error class carries the HTTP status and machine-readable error code
used when it reaches the API layer.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the API layer.
    """

    status_code: int = 400
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Not Found Errors
# ============================================================================


class NotFoundError(DomainError):
    """Raised when a requested record does not exist."""

    status_code = 404
    error_code = "NOT_FOUND"
    entity = "Record"

    def __init__(self, identifier: Any = None, field: str = "id") -> None:
        """Initialize not found error.

        Args:
            identifier: Value that was looked up.
            field: Name of the field the lookup used.
        """
        if identifier is None:
            message = f"{self.entity} not found"
            details: dict[str, Any] = {}
        else:
            message = f"{self.entity} with {field} '{identifier}' not found"
            details = {field: identifier}
        super().__init__(message, details=details)


class LanguageNotFoundError(NotFoundError):
    error_code = "LANGUAGE_NOT_FOUND"
    entity = "Language"


class CatalogNotFoundError(NotFoundError):
    error_code = "CATALOG_NOT_FOUND"
    entity = "Catalog"


class CategoryNotFoundError(NotFoundError):
    error_code = "CATEGORY_NOT_FOUND"
    entity = "Category"


class CollectionNotFoundError(NotFoundError):
    error_code = "COLLECTION_NOT_FOUND"
    entity = "Collection"


class ItemNotFoundError(NotFoundError):
    error_code = "ITEM_NOT_FOUND"
    entity = "Item"


class BrandNotFoundError(NotFoundError):
    error_code = "BRAND_NOT_FOUND"
    entity = "Brand"


class VacancyNotFoundError(NotFoundError):
    error_code = "VACANCY_NOT_FOUND"
    entity = "Vacancy"


class ReviewNotFoundError(NotFoundError):
    error_code = "REVIEW_NOT_FOUND"
    entity = "Review"


class DiscountNotFoundError(NotFoundError):
    error_code = "DISCOUNT_NOT_FOUND"
    entity = "Discount"


class ImageNotFoundError(NotFoundError):
    error_code = "IMAGE_NOT_FOUND"
    entity = "Image"


# ============================================================================
# Conflict Errors
# ============================================================================


class AlreadyExistsError(DomainError):
    """Raised when a record with the same unique key already exists."""

    error_code = "ALREADY_EXISTS"
    entity = "Record"

    def __init__(self, name: str, language: str | None = None) -> None:
        """Initialize already exists error.

        Args:
            name: Conflicting name.
            language: Language the name belongs to, if localized.
        """
        details: dict[str, Any] = {"name": name}
        message = f"{self.entity} with name '{name}' already exists"
        if language is not None:
            details["language"] = language
            message = f"{message} for language '{language}'"
        super().__init__(message, details=details)


class CatalogExistsError(AlreadyExistsError):
    error_code = "CATALOG_EXISTS"
    entity = "Catalog"


class CategoryExistsError(AlreadyExistsError):
    error_code = "CATEGORY_EXISTS"
    entity = "Category"


class CollectionExistsError(AlreadyExistsError):
    error_code = "COLLECTION_EXISTS"
    entity = "Collection"


class ItemExistsError(AlreadyExistsError):
    error_code = "ITEM_EXISTS"
    entity = "Item"


class BrandExistsError(AlreadyExistsError):
    error_code = "BRAND_EXISTS"
    entity = "Brand"


class UserExistsError(AlreadyExistsError):
    error_code = "USER_EXISTS"
    entity = "User"


class DiscountExistsError(DomainError):
    """Raised when a running discount already targets the same record."""

    error_code = "DISCOUNT_EXISTS"

    def __init__(self, discount_type: str, target_id: int) -> None:
        super().__init__(
            f"An active {discount_type} discount for target {target_id} already exists",
            details={"discount_type": discount_type, "target_id": target_id},
        )


class CategoryInUseError(DomainError):
    """Raised when deleting a category that items still reference."""

    error_code = "CATEGORY_IN_USE"

    def __init__(self, category_id: int, item_count: int) -> None:
        super().__init__(
            f"Category {category_id} is referenced by {item_count} item(s)",
            details={"category_id": category_id, "item_count": item_count},
        )


class AlreadySeededError(DomainError):
    """Raised when demo data is requested for a non-empty database."""

    error_code = "ALREADY_SEEDED"

    def __init__(self) -> None:
        super().__init__("Starter data already exists")


# ============================================================================
# Validation Errors
# ============================================================================


class RequiredLanguageError(DomainError):
    """Raised when a localized payload does not carry every language."""

    error_code = "REQUIRED_LANGUAGES"

    def __init__(self, required: list[str], received: int) -> None:
        """Initialize required language error.

        Args:
            required: Language codes every payload must cover.
            received: Number of translations actually received.
        """
        super().__init__(
            f"Required {len(required)} languages",
            details={"required": required, "received": received},
        )


class InvalidLanguageCodeError(DomainError):
    """Raised when a translation uses an unsupported or repeated code."""

    error_code = "INVALID_LANGUAGE_CODE"

    def __init__(self, code: str, required: list[str]) -> None:
        """Initialize invalid language code error.

        Args:
            code: The offending language code.
            required: Supported language codes.
        """
        super().__init__(
            f"Invalid language code '{code}', expected each of {', '.join(required)} once",
            details={"code": code, "required": required},
        )


class InvalidImageError(DomainError):
    """Raised when an uploaded file is not an image."""

    error_code = "INVALID_IMAGE"

    def __init__(self, filename: str, content_type: str | None) -> None:
        super().__init__(
            f"File '{filename}' is not an image",
            details={"filename": filename, "content_type": content_type},
        )


class InvalidDiscountError(DomainError):
    """Raised when a discount's dates or percentage are inconsistent."""

    error_code = "INVALID_DISCOUNT"


class InvalidPayloadError(DomainError):
    """Raised when a multipart JSON field cannot be parsed."""

    error_code = "INVALID_PAYLOAD"


# ============================================================================
# Authentication Errors
# ============================================================================


class InvalidCredentialsError(DomainError):
    """Raised when a login attempt fails."""

    status_code = 401
    error_code = "INVALID_CREDENTIALS"

    def __init__(self) -> None:
        super().__init__("Invalid username or password")


class PermissionDeniedError(DomainError):
    """Raised when a bearer token cannot be validated."""

    status_code = 403
    error_code = "PERMISSION_DENIED"

    def __init__(self, reason: str | None = None) -> None:
        super().__init__(
            "Permissions denied",
            details={"reason": reason} if reason else None,
        )
