"""Tests for catalog API endpoints.

Tests:
- Creating catalogs with colors
- Adding localizations
- Grouped detail retrieval
- Language listings, updates and deletion
"""

import pytest

RU, KGZ, EN = 1, 2, 3


@pytest.fixture
def catalog_body() -> dict:
    """Catalog create request in Russian with two colors."""
    return {
        "price": 1200.0,
        "language_id": RU,
        "name": "Смеситель",
        "description": "Хромированный",
        "colors": [
            {"name": "Chrome", "hash_color": "#C0C0C0"},
            {"name": "White", "hash_color": "#FFFFFF"},
        ],
    }


class TestCreateCatalog:
    """Tests for POST /api/catalogs."""

    @pytest.mark.asyncio
    async def test_create_catalog(self, client, auth_headers, catalog_body) -> None:
        """Catalog is created with its first localization and colors."""
        response = await client.post("/api/catalogs", json=catalog_body, headers=auth_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["price"] == 1200.0
        assert len(data["languages"]) == 1
        language = data["languages"][0]
        assert language["language_code"] == "ru"
        assert language["name"] == "Смеситель"
        assert [c["hash_color"] for c in language["colors"]] == ["#C0C0C0", "#FFFFFF"]

    @pytest.mark.asyncio
    async def test_colors_are_reused(self, client, auth_headers, catalog_body) -> None:
        """An identical color is shared between catalogs."""
        first = await client.post("/api/catalogs", json=catalog_body, headers=auth_headers)
        catalog_body["name"] = "Раковина"
        second = await client.post("/api/catalogs", json=catalog_body, headers=auth_headers)

        first_ids = [c["id"] for c in first.json()["languages"][0]["colors"]]
        second_ids = [c["id"] for c in second.json()["languages"][0]["colors"]]
        assert first_ids == second_ids

    @pytest.mark.asyncio
    async def test_duplicate_name_in_language(self, client, auth_headers, catalog_body) -> None:
        """The same name cannot be used twice in one language."""
        await client.post("/api/catalogs", json=catalog_body, headers=auth_headers)
        response = await client.post("/api/catalogs", json=catalog_body, headers=auth_headers)

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "CATALOG_EXISTS"
        assert data["details"]["language"] == "ru"

    @pytest.mark.asyncio
    async def test_create_without_colors(self, client, auth_headers) -> None:
        """Colors are optional."""
        response = await client.post(
            "/api/catalogs",
            json={"price": 1.0, "language_id": RU, "name": "Plain"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json()["languages"][0]["colors"] == []

        listing = await client.get("/api/catalogs", params={"lang": "ru"})
        assert listing.json()[0]["colors"] == []

    @pytest.mark.asyncio
    async def test_unknown_language(self, client, auth_headers, catalog_body) -> None:
        """An unknown language id is not found."""
        catalog_body["language_id"] = 42
        response = await client.post("/api/catalogs", json=catalog_body, headers=auth_headers)
        assert response.status_code == 404


class TestCatalogLocalizations:
    """Tests for POST /api/catalogs/{id}/localizations and GET /api/catalogs/{id}."""

    @pytest.mark.asyncio
    async def test_detail_groups_by_language(self, client, auth_headers, catalog_body) -> None:
        """Every localization lists each color once."""
        created = await client.post("/api/catalogs", json=catalog_body, headers=auth_headers)
        catalog_id = created.json()["id"]

        response = await client.post(
            f"/api/catalogs/{catalog_id}/localizations",
            json={"language_id": EN, "name": "Mixer", "description": "Chrome plated"},
            headers=auth_headers,
        )
        assert response.status_code == 201

        response = await client.get(f"/api/catalogs/{catalog_id}")
        assert response.status_code == 200
        languages = response.json()["languages"]
        assert [entry["language_code"] for entry in languages] == ["ru", "en"]
        for entry in languages:
            assert len(entry["colors"]) == 2

    @pytest.mark.asyncio
    async def test_second_localization_same_language(
        self, client, auth_headers, catalog_body
    ) -> None:
        """A catalog is localized at most once per language."""
        created = await client.post("/api/catalogs", json=catalog_body, headers=auth_headers)
        catalog_id = created.json()["id"]

        response = await client.post(
            f"/api/catalogs/{catalog_id}/localizations",
            json={"language_id": RU, "name": "Другое имя"},
            headers=auth_headers,
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_localization_name_taken_by_other_catalog(
        self, client, auth_headers, catalog_body
    ) -> None:
        """A new localization cannot reuse another catalog's name in that language."""
        await client.post("/api/catalogs", json=catalog_body, headers=auth_headers)
        other = await client.post(
            "/api/catalogs",
            json={"price": 50.0, "language_id": EN, "name": "Sink"},
            headers=auth_headers,
        )

        response = await client.post(
            f"/api/catalogs/{other.json()['id']}/localizations",
            json={"language_id": RU, "name": "Смеситель"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "CATALOG_EXISTS"
        listing = await client.get("/api/catalogs", params={"lang": "ru"})
        assert [c["name"] for c in listing.json()] == ["Смеситель"]

    @pytest.mark.asyncio
    async def test_missing_catalog(self, client) -> None:
        """Unknown catalogs are not found."""
        response = await client.get("/api/catalogs/999")
        assert response.status_code == 404
        assert response.json()["error_code"] == "CATALOG_NOT_FOUND"


class TestListAndUpdateCatalogs:
    """Tests for listing, updating and deleting catalogs."""

    @pytest.mark.asyncio
    async def test_list_by_language(self, client, auth_headers, catalog_body) -> None:
        """Only catalogs localized in the language are listed."""
        await client.post("/api/catalogs", json=catalog_body, headers=auth_headers)

        ru = await client.get("/api/catalogs", params={"lang": "ru"})
        en = await client.get("/api/catalogs", params={"lang": "en"})

        assert [c["name"] for c in ru.json()] == ["Смеситель"]
        assert en.json() == []

    @pytest.mark.asyncio
    async def test_list_unknown_language(self, client) -> None:
        """Unknown language codes are not found."""
        response = await client.get("/api/catalogs", params={"lang": "de"})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_update_catalog(self, client, auth_headers, catalog_body) -> None:
        """Price and the localization in one language are replaced."""
        created = await client.post("/api/catalogs", json=catalog_body, headers=auth_headers)
        catalog_id = created.json()["id"]

        response = await client.put(
            f"/api/catalogs/{catalog_id}",
            json={"price": 990.0, "language_id": RU, "name": "Смеситель 2", "description": ""},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["price"] == 990.0
        assert data["languages"][0]["name"] == "Смеситель 2"

    @pytest.mark.asyncio
    async def test_update_keeps_own_name(self, client, auth_headers, catalog_body) -> None:
        """A catalog may be saved again under its current name."""
        created = await client.post("/api/catalogs", json=catalog_body, headers=auth_headers)
        catalog_id = created.json()["id"]

        response = await client.put(
            f"/api/catalogs/{catalog_id}",
            json={"price": 1300.0, "language_id": RU, "name": "Смеситель"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["price"] == 1300.0

    @pytest.mark.asyncio
    async def test_update_to_name_of_other_catalog(
        self, client, auth_headers, catalog_body
    ) -> None:
        """Renaming onto another catalog's name in the same language is rejected."""
        await client.post("/api/catalogs", json=catalog_body, headers=auth_headers)
        catalog_body["name"] = "Раковина"
        other = await client.post("/api/catalogs", json=catalog_body, headers=auth_headers)

        response = await client.put(
            f"/api/catalogs/{other.json()['id']}",
            json={"price": 10.0, "language_id": RU, "name": "Смеситель"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "CATALOG_EXISTS"

    @pytest.mark.asyncio
    async def test_update_missing_localization(self, client, auth_headers, catalog_body) -> None:
        """Updating a language the catalog lacks is not found."""
        created = await client.post("/api/catalogs", json=catalog_body, headers=auth_headers)
        catalog_id = created.json()["id"]

        response = await client.put(
            f"/api/catalogs/{catalog_id}",
            json={"price": 990.0, "language_id": KGZ, "name": "Аралаштыргыч"},
            headers=auth_headers,
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_catalog(self, client, auth_headers, catalog_body) -> None:
        """A deleted catalog is gone."""
        created = await client.post("/api/catalogs", json=catalog_body, headers=auth_headers)
        catalog_id = created.json()["id"]

        response = await client.delete(f"/api/catalogs/{catalog_id}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Successful remove catalog"

        response = await client.get(f"/api/catalogs/{catalog_id}")
        assert response.status_code == 404
