"""Fixtures running the repository contract against every backend.

Each test runs twice: once against the in-memory store and once against
SQLAlchemy on an in-memory SQLite database.
"""

import pytest

from portal_link.application.factories import RepositoryFactory
from portal_link.domain.user import User
from portal_link.infrastructure.persistence.memory import InMemoryRepositoryFactory
from portal_link.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyRepositoryFactory,
    create_engine,
    create_session_maker,
    create_tables,
)
from portal_link_config.settings import Settings

SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(params=["memory", "sqlalchemy"])
async def repository_factory(request):
    if request.param == "memory":
        yield InMemoryRepositoryFactory()
        return

    settings = Settings(
        jwt_secret_key="persistence-test-secret",
        database_url_override=SQLITE_MEMORY_URL,
    )
    engine = create_engine(settings)
    await create_tables(engine)
    yield SQLAlchemyRepositoryFactory(create_session_maker(engine))
    await engine.dispose()


async def _create_user(factory: RepositoryFactory, email: str) -> int:
    user = User.create(name=email.split("@")[0], email=email, password_hash="x")
    await factory.user_repository().create(user)
    return user.id


@pytest.fixture
async def owner_id(repository_factory) -> int:
    return await _create_user(repository_factory, "owner@example.com")


@pytest.fixture
async def other_user_id(repository_factory, owner_id) -> int:
    return await _create_user(repository_factory, "other@example.com")


@pytest.fixture
def portal_page_repository(repository_factory):
    return repository_factory.portal_page_repository()


@pytest.fixture
def user_repository(repository_factory):
    return repository_factory.user_repository()
