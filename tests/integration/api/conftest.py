"""Pytest fixtures for API tests.

The application runs on the in-memory repositories, so every test starts
with an empty store and no database is needed.
"""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from portal_link.infrastructure.persistence.memory import InMemoryRepositoryFactory
from portal_link.presentation.api.app import API_V1_PREFIX, create_app
from portal_link_config.settings import Settings

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"
TEST_PASSWORD = "password123"


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled and fast hashing."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        storage_backend="memory",
        password_hash_rounds=4,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
    )


@pytest.fixture
def test_app(api_settings):
    return create_app(
        settings=api_settings,
        repository_factory=InMemoryRepositoryFactory(),
    )


@pytest.fixture
def test_client(test_app):
    with TestClient(test_app) as client:
        yield client


def sign_up(client: TestClient, email: str, name: str = "Test User") -> dict:
    """Register a user and return bearer headers for it."""
    response = client.post(
        f"{API_V1_PREFIX}/user/signup",
        json={"name": name, "email": email, "password": TEST_PASSWORD},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def auth_headers(test_client) -> dict:
    return sign_up(test_client, "john@example.com", name="John Doe")


@pytest.fixture
def other_auth_headers(test_client) -> dict:
    return sign_up(test_client, "jane@example.com", name="Jane Doe")


@pytest.fixture
def create_page(test_client, auth_headers):
    """Create a page for the default user and return its id."""

    def _create(slug: str = "john-doe", title: str = "John Doe", **extra) -> int:
        response = test_client.post(
            f"{API_V1_PREFIX}/me/portal-pages",
            headers=auth_headers,
            json={"slug": slug, "title": title, **extra},
        )
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _create
