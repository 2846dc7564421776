import random
from typing import AsyncGenerator
import pytest
from httpx import ASGITransport, AsyncClient
from fastapi import FastAPI
from asgi_lifespan import LifespanManager

from lawdesk.core.config import Settings
from lawdesk.storage import MemoryStorage
from main import create_app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin-test-password"


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        SESSION_SECRET="test-session-secret",
        FIRST_ADMIN_USERNAME=ADMIN_USERNAME,
        FIRST_ADMIN_PASSWORD=ADMIN_PASSWORD,
        ENABLE_RESPONSE_COMPRESSION=False,
    )


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage(rng=random.Random(1234))


@pytest.fixture
async def test_app(test_settings, storage) -> AsyncGenerator[FastAPI, None]:
    """Create a fresh application, with its own store, for each test."""
    app = create_app(settings=test_settings, storage=storage)
    async with LifespanManager(app):
        yield app


def _make_client(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
async def client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """An anonymous client."""
    async with _make_client(test_app) as client:
        yield client


@pytest.fixture
async def admin_client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """A client logged in as the seeded administrator."""
    async with _make_client(test_app) as client:
        response = await client.post(
            "/api/auth/login",
            json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
        )
        assert response.status_code == 200
        yield client


@pytest.fixture
def lawyer_data() -> dict:
    return {
        "username": "ana",
        "password": "lawyer_password123",
        "name": "Ana Souza",
        "role": "advogado",
        "email": "ana@example.com",
        "phone": "11988887777",
    }


@pytest.fixture
async def lawyer_client(test_app, admin_client, lawyer_data) -> AsyncGenerator[AsyncClient, None]:
    """A client logged in as a non-admin user."""
    response = await admin_client.post("/api/users", json=lawyer_data)
    assert response.status_code == 201

    async with _make_client(test_app) as client:
        response = await client.post(
            "/api/auth/login",
            json={"username": lawyer_data["username"], "password": lawyer_data["password"]},
        )
        assert response.status_code == 200
        client.user_id = response.json()["id"]
        yield client


@pytest.fixture
def lead_data() -> dict:
    return {
        "name": "Maria",
        "phone": "11999999999",
        "legalArea": "direito_civil",
        "origin": "site",
    }


@pytest.fixture
def client_data() -> dict:
    return {
        "name": "João Pereira",
        "phone": "11977776666",
        "email": "joao@example.com",
        "document": "123.456.789-00",
    }
