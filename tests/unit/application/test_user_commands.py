"""Unit tests for SignUpCommand and SignInCommand."""

import pytest

from portal_link.application.commands.user import SignInCommand, SignUpCommand
from portal_link.domain.user import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    InvalidEmailError,
    InvalidUserNameError,
    WeakPasswordError,
)


@pytest.fixture
def sign_up(factory, password_service, token_service) -> SignUpCommand:
    return SignUpCommand.from_factory(factory, password_service, token_service)


@pytest.fixture
def sign_in(factory, password_service, token_service) -> SignInCommand:
    return SignInCommand.from_factory(factory, password_service, token_service)


class TestSignUpCommand:
    async def test_creates_user_and_issues_token(
        self,
        sign_up,
        factory,
        token_service,
    ):
        result = await sign_up.execute(
            name="John Doe",
            email="John@Example.com",
            password="password123",
        )

        assert result.user_id > 0
        assert result.token_type == "bearer"
        assert token_service.verify_token(result.access_token).user_id == (
            result.user_id
        )
        user = await factory.user_repository().find_by_id(result.user_id)
        assert user.email == "john@example.com"
        assert user.password_hash != "password123"

    async def test_duplicate_email_is_case_insensitive(self, sign_up):
        await sign_up.execute(
            name="John",
            email="john@example.com",
            password="password123",
        )

        with pytest.raises(EmailAlreadyExistsError):
            await sign_up.execute(
                name="Johnny",
                email="JOHN@example.com",
                password="password456",
            )

    @pytest.mark.parametrize(
        ("name", "email", "password", "error"),
        [
            ("", "john@example.com", "password123", InvalidUserNameError),
            ("John", "not-an-email", "password123", InvalidEmailError),
            ("John", "john@example.com", "short1", WeakPasswordError),
            ("John", "john@example.com", "12345678", WeakPasswordError),
            ("John", "john@example.com", "password", WeakPasswordError),
        ],
    )
    async def test_validation(self, sign_up, factory, name, email, password, error):
        with pytest.raises(error):
            await sign_up.execute(name=name, email=email, password=password)

        assert await factory.user_repository().find_by_email(
            "john@example.com",
        ) is None


class TestSignInCommand:
    @pytest.fixture
    async def user_id(self, sign_up) -> int:
        result = await sign_up.execute(
            name="John",
            email="john@example.com",
            password="password123",
        )
        return result.user_id

    async def test_valid_credentials(self, sign_in, token_service, user_id):
        result = await sign_in.execute(
            email="John@example.com",
            password="password123",
        )

        assert result.user_id == user_id
        assert token_service.verify_token(result.access_token).user_id == user_id

    async def test_wrong_password(self, sign_in, user_id):
        with pytest.raises(InvalidCredentialsError):
            await sign_in.execute(email="john@example.com", password="password124")

    async def test_unknown_email_gives_same_error(self, sign_in, user_id):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            await sign_in.execute(email="jane@example.com", password="password123")

        assert exc_info.value.message == "Invalid email or password"

    async def test_malformed_input_is_a_validation_error(self, sign_in):
        with pytest.raises(InvalidEmailError):
            await sign_in.execute(email="nope", password="password123")
        with pytest.raises(WeakPasswordError):
            await sign_in.execute(email="john@example.com", password="short")
