"""Domain layer - typed errors, language rules and price rules.

Example usage:
    from plumbing.domain import discounted_price, validate_language_codes

    validate_language_codes(["ru", "kgz", "en"])
    discounted_price(1000.0, 15)  # 850.0
"""

from plumbing.domain.exceptions import (
    AlreadyExistsError,
    DomainError,
    NotFoundError,
    PermissionDeniedError,
)
from plumbing.domain.localization import (
    DEFAULT_LANGUAGE,
    REQUIRED_LANGUAGES,
    validate_language_codes,
)
from plumbing.domain.pricing import DiscountType, discounted_price

__all__ = [
    # Exceptions
    "AlreadyExistsError",
    "DomainError",
    "NotFoundError",
    "PermissionDeniedError",
    # Localization
    "DEFAULT_LANGUAGE",
    "REQUIRED_LANGUAGES",
    "validate_language_codes",
    # Pricing
    "DiscountType",
    "discounted_price",
]
