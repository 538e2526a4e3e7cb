"""Tests for the HTTP API."""

import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from clean_auth.application.container import DependencyContainer
from clean_auth.domain.entities.user import User
from clean_auth.domain.repositories.auth_repository import AuthRepository
from clean_auth.presentation.api.main import create_app
from clean_auth.shared.config.settings import Settings


@pytest.fixture
def app():
    return create_app(DependencyContainer(Settings()))


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def test_health_endpoint(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "backend": "mock"}


def test_initial_state_is_idle(client):
    response = client.get("/api/state")
    assert response.status_code == 200
    assert response.json() == {"status": "idle", "user": None, "error_kind": None, "message": None}


def test_login_success(client):
    response = client.post("/api/login", json={"email": "user@example.com", "password": "longenough"})
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "success"
    assert data["user"]["email"] == "user@example.com"
    assert data["user"]["id"]
    assert data["error_kind"] is None

    assert client.get("/api/state").json()["status"] == "success"


def test_login_short_password(client):
    response = client.post("/api/login", json={"email": "user@example.com", "password": "short"})
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "failed"
    assert data["error_kind"] == "invalid_password"
    assert "at least 6 characters" in data["message"]
    assert data["user"] is None


def test_login_missing_field(client):
    response = client.post("/api/login", json={"email": "user@example.com"})
    assert response.status_code == 422


def test_logout_resets_state(client):
    client.post("/api/login", json={"email": "user@example.com", "password": "longenough"})
    response = client.post("/api/logout")
    assert response.status_code == 200
    assert response.json()["status"] == "idle"


class BlockingRepository(AuthRepository):
    """Repository that holds each login until released."""

    def __init__(self):
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def login(self, email: str, password: str) -> User:
        self.started.set()
        await self.release.wait()
        return User(email=email, token="t")


@pytest.mark.asyncio
async def test_login_rejected_while_loading():
    repository = BlockingRepository()
    app = create_app(DependencyContainer(Settings(), repository=repository))
    transport = httpx.ASGITransport(app=app)

    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        first = asyncio.create_task(
            client.post("/api/login", json={"email": "first@example.com", "password": "longenough"})
        )
        await repository.started.wait()

        state = await client.get("/api/state")
        assert state.json()["status"] == "loading"

        second = await client.post("/api/login", json={"email": "second@example.com", "password": "longenough"})
        assert second.status_code == 409

        logout = await client.post("/api/logout")
        assert logout.status_code == 409

        repository.release.set()
        response = await first

    assert response.status_code == 200
    assert response.json()["status"] == "success"
    assert response.json()["user"]["email"] == "first@example.com"
