"""Tests for application wiring: health, info and error envelopes."""

from fastapi.testclient import TestClient

from portal_link.infrastructure.persistence.memory import InMemoryRepositoryFactory
from portal_link.presentation.api.app import API_VERSION, create_app


def test_health(test_client: TestClient):
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["version"] == API_VERSION


def test_root_lists_api_base(test_client: TestClient, api_v1_prefix):
    response = test_client.get("/")

    assert response.status_code == 200
    assert response.json()["api_base"] == api_v1_prefix


def test_unknown_route_uses_error_envelope(test_client: TestClient):
    response = test_client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found", "code": "NOT_FOUND"}


def test_unhandled_error_is_internal_error(api_settings):
    app = create_app(
        settings=api_settings,
        repository_factory=InMemoryRepositoryFactory(),
    )

    @app.get("/boom")
    async def boom() -> dict:
        raise RuntimeError("kaboom")

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {
        "detail": "An internal error occurred",
        "code": "INTERNAL_ERROR",
    }


def test_memory_backend_from_settings(api_settings):
    app = create_app(settings=api_settings)

    assert isinstance(app.state.repository_factory, InMemoryRepositoryFactory)
    assert app.state.engine is None


def test_docs_hidden_without_debug(api_settings):
    settings = api_settings.model_copy(update={"api_debug": False})
    app = create_app(settings=settings, repository_factory=InMemoryRepositoryFactory())

    with TestClient(app) as client:
        assert client.get("/docs").status_code == 404
