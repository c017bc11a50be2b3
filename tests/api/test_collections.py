"""Tests for collection API endpoints.

Tests:
- Multipart creation with photos and per-file options
- Localization rules and name uniqueness
- Listings, filters, search and recommendations
- Partial updates and deletion with items and files
"""

import json

import pytest

from tests.api.payloads import photo_form, translations


class TestCreateCollection:
    """Tests for POST /api/collections."""

    @pytest.mark.asyncio
    async def test_create_with_photos(self, create_collection, media_storage) -> None:
        """Photos are stored with their cover flag and color."""
        data = await create_collection(
            "Classic",
            photos=[("side.png", False, "#000000"), ("front.png", True, "#FFFFFF")],
        )

        assert data["price"] == 1000.0
        assert len(data["translations"]) == 3
        assert len(data["photos"]) == 2
        cover = data["photos"][0]
        assert cover["is_main"] is True
        assert cover["hash_color"] == "#FFFFFF"
        assert cover["url"].startswith("http://test/media/images/front_")
        assert {c["hash_color"] for c in data["colors"]} == {"#000000", "#FFFFFF"}
        assert len(list(media_storage.directory.iterdir())) == 2

    @pytest.mark.asyncio
    async def test_requires_every_language(self, client, auth_headers) -> None:
        """A collection is written in all three languages."""
        document = {"price": 10.0, "translations": translations("Classic")[:2]}
        response = await client.post(
            "/api/collections",
            data={"collection": json.dumps(document)},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["error_code"] == "REQUIRED_LANGUAGES"

    @pytest.mark.asyncio
    async def test_rejects_duplicate_name(self, client, auth_headers, create_collection) -> None:
        """Names are unique per language."""
        await create_collection("Classic")

        document = {"price": 10.0, "translations": translations("Classic")}
        response = await client.post(
            "/api/collections",
            data={"collection": json.dumps(document)},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["error_code"] == "COLLECTION_EXISTS"

    @pytest.mark.asyncio
    async def test_rejects_invalid_json(self, client, auth_headers) -> None:
        """The collection field must hold a JSON document."""
        response = await client.post(
            "/api/collections",
            data={"collection": "{not json"},
            headers=auth_headers,
        )
        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "INVALID_PAYLOAD"
        assert data["details"]["field"] == "collection"

    @pytest.mark.asyncio
    async def test_rejects_non_image(self, client, auth_headers, media_storage) -> None:
        """Non-image uploads are rejected and nothing is written."""
        document = {"price": 10.0, "translations": translations("Classic")}
        response = await client.post(
            "/api/collections",
            data={"collection": json.dumps(document)},
            files=[("photos", ("notes.txt", b"hello", "text/plain"))],
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_IMAGE"
        assert not media_storage.directory.exists()

    @pytest.mark.asyncio
    async def test_requires_token(self, client) -> None:
        """Creating a collection needs a token."""
        response = await client.post("/api/collections", data={"collection": "{}"})
        assert response.status_code == 401


class TestListCollections:
    """Tests for collection listings."""

    @pytest.mark.asyncio
    async def test_list_in_language(self, client, create_collection) -> None:
        """Collections are listed with the requested translation."""
        await create_collection("Classic")

        response = await client.get("/api/collections", params={"lang": "kgz"})
        assert response.status_code == 200
        data = response.json()
        assert [c["name"] for c in data] == ["Classic KGZ"]
        assert data[0]["new_price"] == data[0]["price"]

    @pytest.mark.asyncio
    async def test_flag_listings(self, client, create_collection) -> None:
        """Popular, new, producer and painted listings filter by flag."""
        await create_collection("Classic", is_popular=True, is_producer=True)
        await create_collection("Modern", is_new=True, is_painted=True)

        popular = await client.get("/api/collections/popular", params={"lang": "en"})
        new = await client.get("/api/collections/new", params={"lang": "en"})
        producers = await client.get("/api/collections/producers", params={"lang": "en"})
        painted = await client.get("/api/collections/painted", params={"lang": "en"})

        assert [c["name"] for c in popular.json()] == ["Classic"]
        assert [c["name"] for c in new.json()] == ["Modern"]
        assert [c["name"] for c in producers.json()] == ["Classic"]
        assert [c["name"] for c in painted.json()] == ["Modern"]

    @pytest.mark.asyncio
    async def test_unknown_language(self, client) -> None:
        """Unknown language codes are not found."""
        response = await client.get("/api/collections", params={"lang": "fr"})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_get_one(self, client, create_collection) -> None:
        """A collection is read in one language."""
        created = await create_collection("Classic")

        response = await client.get(f"/api/collections/{created['id']}", params={"lang": "en"})
        assert response.status_code == 200
        assert response.json()["name"] == "Classic"

    @pytest.mark.asyncio
    async def test_admin_detail(self, client, create_collection) -> None:
        """The admin view carries every translation."""
        created = await create_collection("Classic")

        response = await client.get(f"/api/collections/admin/{created['id']}")
        assert response.status_code == 200
        codes = {t["language_code"] for t in response.json()["translations"]}
        assert codes == {"ru", "kgz", "en"}

    @pytest.mark.asyncio
    async def test_get_missing(self, client) -> None:
        """Unknown collections are not found."""
        response = await client.get("/api/collections/999")
        assert response.status_code == 404


class TestSearchAndRecommendations:
    """Tests for collection search and recommendations."""

    @pytest.mark.asyncio
    async def test_search_by_name(self, client, create_collection) -> None:
        """Search matches a case-insensitive substring of the name."""
        await create_collection("Classic")
        await create_collection("Modern")

        response = await client.get("/api/collections/search", params={"q": "CLASS", "lang": "en"})
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Classic"]

    @pytest.mark.asyncio
    async def test_search_by_price_range(self, client, create_collection) -> None:
        """Search filters by the price bounds."""
        await create_collection("Classic", price=100.0)
        await create_collection("Modern", price=900.0)

        response = await client.get(
            "/api/collections/search",
            params={"min": 500, "max": 1000, "lang": "en"},
        )
        assert [c["name"] for c in response.json()] == ["Modern"]

    @pytest.mark.asyncio
    async def test_search_without_match(self, client, create_collection) -> None:
        """An empty search result is not found."""
        await create_collection("Classic")

        response = await client.get("/api/collections/search", params={"q": "zzz", "lang": "en"})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_recommendations_popular_first(self, client, create_collection) -> None:
        """Recommendations hold at most seven collections, popular first."""
        for index in range(8):
            await create_collection(f"Line {index}", is_popular=index == 5)

        response = await client.get("/api/collections/recommendations", params={"lang": "en"})
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 7
        assert data[0]["name"] == "Line 5"


class TestUpdateCollection:
    """Tests for PUT /api/collections/{id}."""

    @pytest.mark.asyncio
    async def test_partial_update_keeps_fields(self, client, auth_headers, create_collection) -> None:
        """Omitted fields and translations keep their values."""
        created = await create_collection("Classic", is_popular=True)

        response = await client.put(
            f"/api/collections/{created['id']}",
            data={"collection": json.dumps({"price": 750.0})},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["price"] == 750.0
        assert data["is_popular"] is True
        assert len(data["translations"]) == 3

    @pytest.mark.asyncio
    async def test_update_appends_photos(self, client, auth_headers, create_collection) -> None:
        """New photos are added next to the existing ones."""
        created = await create_collection("Classic", photos=[("front.png", True, "")])

        files, fields = photo_form([("back.png", False, "#123456")])
        response = await client.put(
            f"/api/collections/{created['id']}",
            data={"collection": "{}", **fields},
            files=files,
            headers=auth_headers,
        )
        assert response.status_code == 200
        photos = response.json()["photos"]
        assert len(photos) == 2
        assert photos[0]["is_main"] is True

    @pytest.mark.asyncio
    async def test_update_translations(self, client, auth_headers, create_collection) -> None:
        """Translations are replaced by language code."""
        created = await create_collection("Classic")

        document = {"translations": translations("Heritage")}
        response = await client.put(
            f"/api/collections/{created['id']}",
            data={"collection": json.dumps(document)},
            headers=auth_headers,
        )
        assert response.status_code == 200

        response = await client.get(f"/api/collections/{created['id']}", params={"lang": "en"})
        assert response.json()["name"] == "Heritage"

    @pytest.mark.asyncio
    async def test_update_missing(self, client, auth_headers) -> None:
        """Updating an unknown collection is not found."""
        response = await client.put(
            "/api/collections/999",
            data={"collection": "{}"},
            headers=auth_headers,
        )
        assert response.status_code == 404


class TestDeleteCollection:
    """Tests for DELETE /api/collections/{id}."""

    @pytest.mark.asyncio
    async def test_delete_removes_items_and_files(
        self,
        client,
        auth_headers,
        create_category,
        create_collection,
        create_item,
        media_storage,
    ) -> None:
        """Items, photos and stored files go with the collection."""
        category_id = await create_category()
        collection = await create_collection("Classic", photos=[("front.png", True, "")])
        item = await create_item(category_id, collection["id"], photos=[("tap.png", True, "")])

        response = await client.delete(f"/api/collections/{collection['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Successful remove collection"

        assert (await client.get(f"/api/collections/{collection['id']}")).status_code == 404
        assert (await client.get(f"/api/items/{item['id']}")).status_code == 404
        assert list(media_storage.directory.iterdir()) == []
