"""Price and discount rules."""

from enum import Enum

# Exclusive lower and inclusive upper bound of a discount percentage.
MIN_DISCOUNT_PERCENTAGE = 0.0
MAX_DISCOUNT_PERCENTAGE = 100.0


class DiscountType(str, Enum):
    """Kind of record a discount applies to."""

    COLLECTION = "collection"
    ITEM = "item"


def discounted_price(price: float, percentage: float | None) -> float:
    """Apply a percentage discount to a price.

    Args:
        price: Original price.
        percentage: Discount in percent, or None when there is no discount.

    Returns:
        Discounted price rounded to cents. Non-positive prices yield 0.
    """
    if percentage is None:
        return price
    if price <= 0:
        return 0.0
    return round(price * (1 - percentage / 100), 2)


def is_valid_percentage(percentage: float) -> bool:
    """Check that a percentage lies in (0, 100]."""
    return MIN_DISCOUNT_PERCENTAGE < percentage <= MAX_DISCOUNT_PERCENTAGE
