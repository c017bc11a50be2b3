"""Tests for item API endpoints."""

import json

import pytest
import pytest_asyncio

from tests.api.payloads import translations


@pytest_asyncio.fixture
async def catalog_tree(create_category, create_collection) -> dict[str, int]:
    """Two categories and one collection to hang items on."""
    return {
        "faucets": await create_category("Faucets"),
        "sinks": await create_category("Sinks"),
        "collection": (await create_collection("Classic"))["id"],
    }


class TestCreateItem:
    """Tests for POST /api/items."""

    @pytest.mark.asyncio
    async def test_create_item(self, create_item, catalog_tree) -> None:
        """Item is created under its category and collection."""
        data = await create_item(
            catalog_tree["faucets"],
            catalog_tree["collection"],
            name="Mixer",
            photos=[("mixer.png", True, "#C0C0C0")],
        )

        assert data["category_id"] == catalog_tree["faucets"]
        assert data["collection_id"] == catalog_tree["collection"]
        assert data["size"] == "M"
        assert data["colors"] == [{"hash_color": "#C0C0C0"}]

    @pytest.mark.asyncio
    async def test_unknown_category(self, client, auth_headers, catalog_tree) -> None:
        """Items need an existing category."""
        document = {
            "category_id": 999,
            "collection_id": catalog_tree["collection"],
            "translations": translations("Mixer"),
        }
        response = await client.post(
            "/api/items",
            data={"item": json.dumps(document)},
            headers=auth_headers,
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_duplicate_name(self, client, auth_headers, create_item, catalog_tree) -> None:
        """Item names are unique per language."""
        await create_item(catalog_tree["faucets"], catalog_tree["collection"], name="Mixer")

        document = {
            "category_id": catalog_tree["faucets"],
            "collection_id": catalog_tree["collection"],
            "translations": translations("Mixer"),
        }
        response = await client.post(
            "/api/items",
            data={"item": json.dumps(document)},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["error_code"] == "ITEM_EXISTS"


class TestListItems:
    """Tests for item listings."""

    @pytest.mark.asyncio
    async def test_admin_listing(self, client, create_item, catalog_tree) -> None:
        """The bare listing returns items with every translation."""
        await create_item(catalog_tree["faucets"], catalog_tree["collection"])

        response = await client.get("/api/items")
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert len(data[0]["translations"]) == 3

    @pytest.mark.asyncio
    async def test_by_category(self, client, create_item, catalog_tree) -> None:
        """Items are listed per category."""
        await create_item(catalog_tree["faucets"], catalog_tree["collection"], name="Mixer")
        await create_item(catalog_tree["sinks"], catalog_tree["collection"], name="Basin")

        response = await client.get(
            f"/api/items/by-category/{catalog_tree['sinks']}",
            params={"lang": "en"},
        )
        assert response.status_code == 200
        assert [i["name"] for i in response.json()] == ["Basin"]

    @pytest.mark.asyncio
    async def test_by_collection(self, client, create_item, catalog_tree) -> None:
        """Items are listed per collection."""
        await create_item(catalog_tree["faucets"], catalog_tree["collection"], name="Mixer")

        response = await client.get(
            f"/api/items/by-collection/{catalog_tree['collection']}",
            params={"lang": "ru"},
        )
        assert [i["name"] for i in response.json()] == ["Mixer RU"]

    @pytest.mark.asyncio
    async def test_by_missing_category(self, client) -> None:
        """Listing an unknown category is not found."""
        response = await client.get("/api/items/by-category/999")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_popular_and_new(self, client, create_item, catalog_tree) -> None:
        """Flag listings filter items."""
        await create_item(
            catalog_tree["faucets"], catalog_tree["collection"], name="Mixer", is_popular=True
        )
        await create_item(catalog_tree["faucets"], catalog_tree["collection"], name="Spout", is_new=True)

        popular = await client.get("/api/items/popular", params={"lang": "en"})
        new = await client.get("/api/items/new", params={"lang": "en"})

        assert [i["name"] for i in popular.json()] == ["Mixer"]
        assert [i["name"] for i in new.json()] == ["Spout"]

    @pytest.mark.asyncio
    async def test_search(self, client, create_item, catalog_tree) -> None:
        """Search matches names; no match is not found."""
        await create_item(catalog_tree["faucets"], catalog_tree["collection"], name="Mixer")

        found = await client.get("/api/items/search", params={"q": "mix", "lang": "en"})
        missing = await client.get("/api/items/search", params={"q": "shower", "lang": "en"})

        assert [i["name"] for i in found.json()] == ["Mixer"]
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_recommendations_same_category(self, client, create_item, catalog_tree) -> None:
        """Recommendations come from the item's category and exclude it."""
        mixer = await create_item(catalog_tree["faucets"], catalog_tree["collection"], name="Mixer")
        await create_item(catalog_tree["faucets"], catalog_tree["collection"], name="Spout")
        await create_item(catalog_tree["sinks"], catalog_tree["collection"], name="Basin")

        response = await client.get(
            f"/api/items/{mixer['id']}/recommendations",
            params={"lang": "en"},
        )
        assert response.status_code == 200
        assert [i["name"] for i in response.json()] == ["Spout"]


class TestUpdateAndDeleteItem:
    """Tests for PUT and DELETE /api/items/{id}."""

    @pytest.mark.asyncio
    async def test_partial_update(self, client, auth_headers, create_item, catalog_tree) -> None:
        """Only supplied fields change."""
        item = await create_item(catalog_tree["faucets"], catalog_tree["collection"])

        response = await client.put(
            f"/api/items/{item['id']}",
            data={"item": json.dumps({"size": "XL", "category_id": catalog_tree["sinks"]})},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["size"] == "XL"
        assert data["category_id"] == catalog_tree["sinks"]
        assert data["price"] == item["price"]

    @pytest.mark.asyncio
    async def test_delete_item(
        self, client, auth_headers, create_item, catalog_tree, media_storage
    ) -> None:
        """Deleting an item removes its photo files."""
        item = await create_item(
            catalog_tree["faucets"],
            catalog_tree["collection"],
            photos=[("mixer.png", True, "")],
        )

        response = await client.delete(f"/api/items/{item['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Successful remove item"
        assert list(media_storage.directory.iterdir()) == []

        response = await client.get(f"/api/items/{item['id']}")
        assert response.status_code == 404
