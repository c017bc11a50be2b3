"""Tests for category API endpoints."""

import pytest


def names(ru: str, kgz: str, en: str) -> dict:
    return {
        "translations": [
            {"language_code": "ru", "name": ru},
            {"language_code": "kgz", "name": kgz},
            {"language_code": "en", "name": en},
        ]
    }


class TestCreateCategory:
    """Tests for POST /api/categories."""

    @pytest.mark.asyncio
    async def test_create_category(self, client, auth_headers) -> None:
        """Category is created with all three names."""
        response = await client.post(
            "/api/categories",
            json=names("Смесители", "Аралаштыргычтар", "Faucets"),
            headers=auth_headers,
        )
        assert response.status_code == 201
        data = response.json()
        assert {t["language_code"] for t in data["translations"]} == {"ru", "kgz", "en"}

    @pytest.mark.asyncio
    async def test_requires_every_language(self, client, auth_headers) -> None:
        """Two translations are not enough."""
        body = names("Смесители", "Аралаштыргычтар", "Faucets")
        body["translations"].pop()

        response = await client.post("/api/categories", json=body, headers=auth_headers)
        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "REQUIRED_LANGUAGES"
        assert data["message"] == "Required 3 languages"

    @pytest.mark.asyncio
    async def test_rejects_repeated_language(self, client, auth_headers) -> None:
        """Each language appears exactly once."""
        body = names("Смесители", "Аралаштыргычтар", "Faucets")
        body["translations"][2]["language_code"] = "ru"

        response = await client.post("/api/categories", json=body, headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_LANGUAGE_CODE"

    @pytest.mark.asyncio
    async def test_rejects_duplicate_name(self, client, auth_headers) -> None:
        """A name is unique within its language."""
        await client.post(
            "/api/categories",
            json=names("Смесители", "Аралаштыргычтар", "Faucets"),
            headers=auth_headers,
        )
        response = await client.post(
            "/api/categories",
            json=names("Краны", "Крандар", "Faucets"),
            headers=auth_headers,
        )
        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "CATEGORY_EXISTS"
        assert data["details"] == {"name": "Faucets", "language": "en"}


class TestReadCategories:
    """Tests for GET /api/categories."""

    @pytest.mark.asyncio
    async def test_list_in_language(self, client, create_category) -> None:
        """Names are returned in the requested language."""
        await create_category("Sinks")

        response = await client.get("/api/categories", params={"lang": "kgz"})
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Sinks KGZ"]

    @pytest.mark.asyncio
    async def test_get_one(self, client, create_category) -> None:
        """A category is read in one language."""
        category_id = await create_category("Sinks")

        response = await client.get(f"/api/categories/{category_id}", params={"lang": "en"})
        assert response.status_code == 200
        assert response.json() == {"id": category_id, "name": "Sinks"}

    @pytest.mark.asyncio
    async def test_get_missing(self, client) -> None:
        """Unknown categories are not found."""
        response = await client.get("/api/categories/404")
        assert response.status_code == 404


class TestUpdateAndDeleteCategory:
    """Tests for PUT and DELETE /api/categories/{id}."""

    @pytest.mark.asyncio
    async def test_update_names(self, client, auth_headers, create_category) -> None:
        """Names are replaced in place."""
        category_id = await create_category("Sinks")

        response = await client.put(
            f"/api/categories/{category_id}",
            json=names("Мойки", "Жуугучтар", "Basins"),
            headers=auth_headers,
        )
        assert response.status_code == 200

        response = await client.get(f"/api/categories/{category_id}", params={"lang": "en"})
        assert response.json()["name"] == "Basins"

    @pytest.mark.asyncio
    async def test_update_keeps_own_names(self, client, auth_headers, create_category) -> None:
        """Re-submitting a category's own names is not a conflict."""
        category_id = await create_category("Sinks")

        response = await client.put(
            f"/api/categories/{category_id}",
            json=names("Sinks RU", "Sinks KGZ", "Sinks"),
            headers=auth_headers,
        )
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_delete_unused(self, client, auth_headers, create_category) -> None:
        """A category without items can be deleted."""
        category_id = await create_category("Sinks")

        response = await client.delete(f"/api/categories/{category_id}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Successful remove category"

    @pytest.mark.asyncio
    async def test_delete_in_use(
        self, client, auth_headers, create_category, create_collection, create_item
    ) -> None:
        """A category that items belong to cannot be deleted."""
        category_id = await create_category("Sinks")
        collection = await create_collection("Loft")
        await create_item(category_id, collection["id"])

        response = await client.delete(f"/api/categories/{category_id}", headers=auth_headers)
        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "CATEGORY_IN_USE"
        assert data["details"]["item_count"] == 1
