"""Contract tests shared by all UserRepository implementations."""

import pytest

from portal_link.domain.user import EmailAlreadyExistsError, User

pytestmark = pytest.mark.integration


class TestUserRepository:
    async def test_create_and_find(self, user_repository):
        user = User.create(
            name="John",
            email="john@example.com",
            password_hash="hash",
        )

        await user_repository.create(user)

        assert user.id > 0
        by_id = await user_repository.find_by_id(user.id)
        by_email = await user_repository.find_by_email("JOHN@example.com")
        assert by_id.email == "john@example.com"
        assert by_email.id == user.id
        assert by_email.password_hash == "hash"

    async def test_duplicate_email(self, user_repository):
        await user_repository.create(
            User.create(name="John", email="john@example.com", password_hash="x"),
        )

        with pytest.raises(EmailAlreadyExistsError):
            await user_repository.create(
                User.create(name="Other", email="John@Example.com", password_hash="y"),
            )

    async def test_missing_user(self, user_repository):
        assert await user_repository.find_by_id(999) is None
        assert await user_repository.find_by_email("nobody@example.com") is None

    async def test_id_outside_storage_range(self, user_repository):
        assert await user_repository.find_by_id(2**63) is None
