"""Tests for the login, current-user, and logout endpoints."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestLogin:
    async def test_success(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/auth/login", json={"username": "admin", "password": "adminpass"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["user"]["username"] == "admin"
        assert data["user"]["role"] == "admin"
        assert data["tokens"]["token_type"] == "bearer"
        assert data["tokens"]["access_token"]

    async def test_wrong_password(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/auth/login", json={"username": "admin", "password": "nope"}
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid username or password"

    async def test_missing_field(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/auth/login", json={"username": "admin"})
        assert response.status_code == 422


class TestMe:
    async def test_me(self, client: AsyncClient, staff_headers: dict) -> None:
        response = await client.get("/api/v1/auth/me", headers=staff_headers)
        assert response.status_code == 200
        assert response.json()["name"] == "Staff User"

    async def test_requires_token(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/auth/me")
        assert response.status_code in (401, 403)


class TestLogout:
    async def test_token_is_revoked(self, client: AsyncClient, auth_headers: dict) -> None:
        response = await client.post("/api/v1/auth/logout", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Logged out"

        again = await client.get("/api/v1/auth/me", headers=auth_headers)
        assert again.status_code == 401


class TestHealth:
    async def test_health(self, client: AsyncClient) -> None:
        response = await client.get("/health")
        assert response.json() == {"status": "healthy", "service": "FrontDesk"}
