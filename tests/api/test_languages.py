"""Tests for language endpoints."""

import httpx
import pytest


@pytest.mark.asyncio
async def test_list_languages(client: httpx.AsyncClient) -> None:
    """Every supported language is listed."""
    response = await client.get("/api/languages")
    assert response.status_code == 200
    codes = [language["code"] for language in response.json()]
    assert codes == ["ru", "kgz", "en"]
