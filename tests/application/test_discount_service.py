"""Tests for the discount service against the database."""

from datetime import datetime, timedelta, timezone

import pytest

from plumbing.application.discount_service import DiscountService, as_utc
from plumbing.domain.exceptions import CollectionNotFoundError, InvalidDiscountError
from plumbing.domain.pricing import DiscountType
from plumbing.infrastructure.models import Collection, CollectionTranslation


def test_as_utc_naive_is_utc() -> None:
    """Naive datetimes are taken as UTC."""
    value = as_utc(datetime(2026, 1, 1, 12, 0))
    assert value.tzinfo is timezone.utc
    assert value.hour == 12


def test_as_utc_converts_offsets() -> None:
    """Aware datetimes are converted to UTC."""
    bishkek = timezone(timedelta(hours=6))
    assert as_utc(datetime(2026, 1, 1, 12, 0, tzinfo=bishkek)).hour == 6


@pytest.fixture
def now() -> datetime:
    return datetime.now(timezone.utc)


class TestDiscountService:
    """Tests for DiscountService."""

    @pytest.mark.asyncio
    async def test_create_on_missing_collection(self, session, now) -> None:
        with pytest.raises(CollectionNotFoundError):
            await DiscountService(session).create_discount(
                DiscountType.COLLECTION, 1, 10, now, now + timedelta(days=1)
            )

    @pytest.mark.asyncio
    async def test_rejects_invalid_percentage(self, session, now) -> None:
        with pytest.raises(InvalidDiscountError):
            await DiscountService(session).create_discount(
                DiscountType.COLLECTION, 1, 0, now, now + timedelta(days=1)
            )

    @pytest.mark.asyncio
    async def test_list_active_with_target(self, session, now) -> None:
        """Active discounts are joined with the target translation."""
        collection = Collection(
            price=400.0,
            translations=[
                CollectionTranslation(language_code=code, name=f"Loft {code}", description="")
                for code in ("ru", "kgz", "en")
            ],
        )
        session.add(collection)
        await session.flush()

        service = DiscountService(session)
        await service.create_discount(
            DiscountType.COLLECTION,
            collection.id,
            25,
            now - timedelta(hours=1),
            now + timedelta(days=1),
        )

        active = await service.list_active("kgz")
        assert len(active) == 1
        assert active[0].name == "Loft kgz"
        assert active[0].old_price == 400.0
        assert active[0].new_price == 300.0
