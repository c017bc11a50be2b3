"""Tests for starter data seeding."""

import pytest

from plumbing.application.starter_service import (
    STARTER_CATEGORIES,
    STARTER_COLLECTIONS,
    STARTER_ITEMS,
    StarterService,
)
from plumbing.domain.exceptions import AlreadySeededError
from plumbing.domain.localization import REQUIRED_LANGUAGES


def test_demo_data_covers_every_language() -> None:
    """Every demo record is written in all supported languages."""
    for names in STARTER_CATEGORIES:
        assert set(names) == set(REQUIRED_LANGUAGES)
    for record in STARTER_COLLECTIONS + STARTER_ITEMS:
        assert set(record["translations"]) == set(REQUIRED_LANGUAGES)


def test_items_reference_demo_records() -> None:
    """Item indices point into the demo categories and collections."""
    for item in STARTER_ITEMS:
        assert 0 <= item["category"] < len(STARTER_CATEGORIES)
        assert 0 <= item["collection"] < len(STARTER_COLLECTIONS)


class TestStarterService:
    """Tests for StarterService.seed."""

    @pytest.mark.asyncio
    async def test_seed_once(self, session) -> None:
        service = StarterService(session)

        counts = await service.seed()
        assert counts == {
            "categories": len(STARTER_CATEGORIES),
            "collections": len(STARTER_COLLECTIONS),
            "items": len(STARTER_ITEMS),
        }

        with pytest.raises(AlreadySeededError):
            await service.seed()
