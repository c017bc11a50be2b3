"""Tests for health check endpoints."""

import httpx
import pytest


@pytest.mark.asyncio
async def test_health_check(client: httpx.AsyncClient) -> None:
    """Test health endpoint returns healthy status."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "plumbing-api"
    assert "version" in data


@pytest.mark.asyncio
async def test_readiness_check(client: httpx.AsyncClient) -> None:
    """Test readiness endpoint pings the database."""
    response = await client.get("/ready")
    assert response.status_code == 200
    assert response.json()["status"] == "ready"
