"""Listing filters shared by the collection and item repositories."""

from dataclasses import dataclass


@dataclass
class ListingFilter:
    """Filter parameters for collection and item listings.

    Every field left as None is not applied.
    """

    is_popular: bool | None = None
    is_new: bool | None = None
    is_producer: bool | None = None
    is_painted: bool | None = None
    search: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    category_id: int | None = None
    collection_id: int | None = None
    exclude_id: int | None = None
