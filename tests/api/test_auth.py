"""Tests for registration and login endpoints."""

import httpx
import pytest

from plumbing.application.auth_service import decode_access_token


class TestRegister:
    """Tests for POST /api/register."""

    @pytest.mark.asyncio
    async def test_register_success(self, client: httpx.AsyncClient) -> None:
        """A new username can be registered."""
        response = await client.post(
            "/api/register",
            json={"username": "manager", "password": "s3cret"},
        )
        assert response.status_code == 201
        assert response.json() == {"message": "Successful register"}

    @pytest.mark.asyncio
    async def test_register_duplicate(self, client: httpx.AsyncClient) -> None:
        """A taken username is rejected."""
        body = {"username": "manager", "password": "s3cret"}
        await client.post("/api/register", json=body)

        response = await client.post("/api/register", json=body)
        assert response.status_code == 400
        assert response.json()["error_code"] == "USER_EXISTS"

    @pytest.mark.asyncio
    async def test_register_requires_password(self, client: httpx.AsyncClient) -> None:
        """Empty passwords fail validation."""
        response = await client.post(
            "/api/register",
            json={"username": "manager", "password": ""},
        )
        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"


class TestLogin:
    """Tests for POST /api/login."""

    @pytest.mark.asyncio
    async def test_login_returns_token(self, client: httpx.AsyncClient) -> None:
        """Valid credentials yield a decodable token."""
        body = {"username": "manager", "password": "s3cret"}
        await client.post("/api/register", json=body)

        response = await client.post("/api/login", json=body)
        assert response.status_code == 200
        payload = decode_access_token(response.json()["token"])
        assert payload.username == "manager"
        assert payload.expires_at > payload.issued_at

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, client: httpx.AsyncClient) -> None:
        """A wrong password is unauthorized."""
        await client.post("/api/register", json={"username": "manager", "password": "s3cret"})

        response = await client.post(
            "/api/login",
            json={"username": "manager", "password": "wrong"},
        )
        assert response.status_code == 401
        assert response.json()["error_code"] == "INVALID_CREDENTIALS"

    @pytest.mark.asyncio
    async def test_login_unknown_user(self, client: httpx.AsyncClient) -> None:
        """An unknown username is unauthorized."""
        response = await client.post(
            "/api/login",
            json={"username": "ghost", "password": "whatever"},
        )
        assert response.status_code == 401
