"""Tests for starter data seeding."""

import pytest


class TestStarter:
    """Tests for POST /api/starter."""

    @pytest.mark.asyncio
    async def test_seed_starter(self, client, auth_headers) -> None:
        """Demo data is created once."""
        response = await client.post("/api/starter", headers=auth_headers)
        assert response.status_code == 201
        data = response.json()
        assert data == {
            "message": "Successful create starter",
            "categories": 3,
            "collections": 3,
            "items": 3,
        }

        categories = await client.get("/api/categories", params={"lang": "en"})
        assert len(categories.json()) == 3

    @pytest.mark.asyncio
    async def test_seed_twice(self, client, auth_headers) -> None:
        """Seeding a non-empty database is rejected."""
        await client.post("/api/starter", headers=auth_headers)

        response = await client.post("/api/starter", headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["error_code"] == "ALREADY_SEEDED"

    @pytest.mark.asyncio
    async def test_requires_token(self, client) -> None:
        """Seeding needs a token."""
        response = await client.post("/api/starter")
        assert response.status_code == 401
