"""Factories for API tests."""

import json
from typing import Any

import httpx
import pytest

from tests.api.payloads import photo_form, translations


@pytest.fixture
def create_category(client: httpx.AsyncClient, auth_headers: dict[str, str]):
    """Factory that creates a category and returns its id."""

    async def _create(name: str = "Faucets") -> int:
        response = await client.post(
            "/api/categories",
            json={
                "translations": [
                    {"language_code": t["language_code"], "name": t["name"]}
                    for t in translations(name)
                ]
            },
            headers=auth_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _create


@pytest.fixture
def create_collection(client: httpx.AsyncClient, auth_headers: dict[str, str]):
    """Factory that creates a collection and returns the response body."""

    async def _create(
        name: str = "Classic",
        price: float = 1000.0,
        photos: list[tuple[str, bool, str]] | None = None,
        **flags: Any,
    ) -> dict[str, Any]:
        document = {"price": price, "translations": translations(name, f"{name} line"), **flags}
        files, fields = photo_form(photos or [])
        response = await client.post(
            "/api/collections",
            data={"collection": json.dumps(document), **fields},
            files=files or None,
            headers=auth_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_item(client: httpx.AsyncClient, auth_headers: dict[str, str]):
    """Factory that creates an item and returns the response body."""

    async def _create(
        category_id: int,
        collection_id: int,
        name: str = "Mixer",
        price: float = 200.0,
        photos: list[tuple[str, bool, str]] | None = None,
        **fields: Any,
    ) -> dict[str, Any]:
        document = {
            "category_id": category_id,
            "collection_id": collection_id,
            "size": "M",
            "price": price,
            "translations": translations(name),
            **fields,
        }
        files, options = photo_form(photos or [])
        response = await client.post(
            "/api/items",
            data={"item": json.dumps(document), **options},
            files=files or None,
            headers=auth_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create
