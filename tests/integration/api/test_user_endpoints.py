"""Integration tests for sign-up and sign-in endpoints."""

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.api


class TestSignUp:
    """Tests for POST /api/v1/user/signup."""

    def test_sign_up_returns_token(self, test_client: TestClient, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/user/signup",
            json={
                "name": "John Doe",
                "email": "john@example.com",
                "password": "password123",
            },
        )

        assert response.status_code == 200
        assert response.json()["access_token"]

    def test_duplicate_email(self, test_client: TestClient, api_v1_prefix):
        body = {
            "name": "John Doe",
            "email": "john@example.com",
            "password": "password123",
        }
        test_client.post(f"{api_v1_prefix}/user/signup", json=body)

        response = test_client.post(
            f"{api_v1_prefix}/user/signup",
            json={**body, "email": "JOHN@example.com"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "EMAIL_EXISTS"

    @pytest.mark.parametrize(
        "body",
        [
            {"name": "John", "email": "not-an-email", "password": "password123"},
            {"name": "John", "email": "john@example.com", "password": "12345678"},
            {"name": "John", "email": "john@example.com", "password": "short1"},
            {"name": "", "email": "john@example.com", "password": "password123"},
            {"email": "john@example.com", "password": "password123"},
        ],
    )
    def test_invalid_input(self, test_client: TestClient, api_v1_prefix, body):
        response = test_client.post(f"{api_v1_prefix}/user/signup", json=body)

        assert response.status_code == 400
        data = response.json()
        assert data["code"] == "INVALID_PARAMS"
        assert data["detail"]

    def test_malformed_json(self, test_client: TestClient, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/user/signup",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_PARAMS"


class TestSignIn:
    """Tests for POST /api/v1/user/signin."""

    @pytest.fixture(autouse=True)
    def registered_user(self, test_client: TestClient, api_v1_prefix):
        test_client.post(
            f"{api_v1_prefix}/user/signup",
            json={
                "name": "John Doe",
                "email": "john@example.com",
                "password": "password123",
            },
        )

    def test_sign_in(self, test_client: TestClient, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/user/signin",
            json={"email": "John@Example.com", "password": "password123"},
        )

        assert response.status_code == 200
        token = response.json()["access_token"]

        me = test_client.get(
            f"{api_v1_prefix}/me/portal-pages",
            headers={"Authorization": f"Bearer {token}"},
        )
        assert me.status_code == 200

    @pytest.mark.parametrize(
        "body",
        [
            {"email": "john@example.com", "password": "wrong-password1"},
            {"email": "jane@example.com", "password": "password123"},
        ],
    )
    def test_invalid_credentials(self, test_client: TestClient, api_v1_prefix, body):
        response = test_client.post(f"{api_v1_prefix}/user/signin", json=body)

        assert response.status_code == 401
        assert response.json() == {
            "detail": "Invalid email or password",
            "code": "INVALID_CREDENTIALS",
        }

    def test_short_password_is_invalid_params(
        self,
        test_client: TestClient,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/user/signin",
            json={"email": "john@example.com", "password": "short"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_PARAMS"
