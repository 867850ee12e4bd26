"""Fixtures for application layer tests."""

import pytest

from portal_link.application.commands.portal_page import CreatePortalPageCommand
from portal_link.infrastructure.persistence.memory import InMemoryRepositoryFactory
from portal_link_auth import AccessTokenService, PasswordHashingService

OWNER_ID = 1


@pytest.fixture
def factory() -> InMemoryRepositoryFactory:
    return InMemoryRepositoryFactory()


@pytest.fixture
def password_service() -> PasswordHashingService:
    return PasswordHashingService(rounds=4)


@pytest.fixture
def token_service() -> AccessTokenService:
    return AccessTokenService(secret_key="application-test-secret")


@pytest.fixture
async def page_id(factory) -> int:
    """A page owned by OWNER_ID with slug 'john-doe' and no links."""
    command = CreatePortalPageCommand.from_factory(factory)
    return await command.execute(user_id=OWNER_ID, slug="john-doe", title="John")
