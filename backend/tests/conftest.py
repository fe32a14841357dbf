"""Pytest configuration and fixtures."""
import pytest
from fastapi.testclient import TestClient

from fittracker.config import Settings
from fittracker.main import create_app

TEST_SECRET = "test-secret"


def make_settings(**overrides) -> Settings:
    """Settings for an isolated app: fresh memory store, no demo data, fast hashing."""
    values = {
        "storage_backend": "memory",
        "seed_demo_data": False,
        "jwt_secret_key": TEST_SECRET,
        "bcrypt_rounds": 4,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def auth_headers(token: str) -> dict:
    """Authorization header for a bearer token."""
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def app():
    """Application with its own in-memory store."""
    return create_app(make_settings())


@pytest.fixture
def client(app):
    """Test client with the application's lifespan running."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def register_user(client):
    """Factory that registers a user and returns (headers, user)."""

    def _register(email: str, password: str = "secret123", **profile):
        body = {"email": email, "password": password, **profile}
        response = client.post("/api/auth/register", json=body)
        assert response.status_code == 201, response.text
        data = response.json()
        return auth_headers(data["token"]), data["user"]

    return _register


@pytest.fixture
def alice(register_user):
    """Headers for a registered user."""
    headers, _ = register_user("alice@example.com", name="Alice")
    return headers


@pytest.fixture
def bob(register_user):
    """Headers for a second, unrelated user."""
    headers, _ = register_user("bob@example.com", name="Bob")
    return headers
