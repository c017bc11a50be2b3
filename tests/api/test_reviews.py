"""Tests for review API endpoints."""

import pytest


async def submit(client, username: str = "Aibek", rating: int = 5) -> dict:
    response = await client.post(
        "/api/reviews",
        json={"username": username, "rating": rating, "text": "Good service"},
    )
    assert response.status_code == 201
    return response.json()


class TestReviews:
    """Tests for /api/reviews."""

    @pytest.mark.asyncio
    async def test_submit_review(self, client) -> None:
        """Customers submit reviews without a token."""
        data = await submit(client)
        assert data["username"] == "Aibek"
        assert data["rating"] == 5
        assert "created_at" in data

    @pytest.mark.asyncio
    async def test_rating_range(self, client) -> None:
        """Ratings are between 1 and 5."""
        response = await client.post(
            "/api/reviews",
            json={"username": "Aibek", "rating": 6, "text": "Too good"},
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_newest_first(self, client) -> None:
        """Visible reviews are listed newest first."""
        await submit(client, "First")
        await submit(client, "Second")

        response = await client.get("/api/reviews")
        assert [r["username"] for r in response.json()] == ["Second", "First"]

    @pytest.mark.asyncio
    async def test_toggle_hides_review(self, client, auth_headers) -> None:
        """Hidden reviews leave the public list but stay in the admin list."""
        review = await submit(client)

        response = await client.post(
            f"/api/reviews/{review['id']}/toggle-visibility",
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["is_show"] is False

        public = await client.get("/api/reviews")
        admin = await client.get("/api/reviews/admin", headers=auth_headers)
        assert public.json() == []
        assert [r["is_show"] for r in admin.json()] == [False]

    @pytest.mark.asyncio
    async def test_toggle_requires_token(self, client) -> None:
        """Moderation needs a token."""
        review = await submit(client)
        response = await client.post(f"/api/reviews/{review['id']}/toggle-visibility")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_delete_review(self, client, auth_headers) -> None:
        """Deleted reviews are gone; deleting again is not found."""
        review = await submit(client)

        response = await client.delete(f"/api/reviews/{review['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Successful remove review"

        response = await client.delete(f"/api/reviews/{review['id']}", headers=auth_headers)
        assert response.status_code == 404
