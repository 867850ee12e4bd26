"""Unique constraint violations surface as domain conflicts.

The relational repositories check for taken slugs and emails before
writing. When a concurrent writer wins between that check and the flush,
the database constraint fires instead; these tests remove the check to
force that path.
"""

from unittest.mock import AsyncMock

import pytest

from portal_link.domain.portal_page import PortalPage, SlugAlreadyExistsError
from portal_link.domain.user import EmailAlreadyExistsError, User
from portal_link.infrastructure.persistence.sqlalchemy import (
    PortalPageRepositorySQLAlchemy,
    SQLAlchemyRepositoryFactory,
    UserRepositorySQLAlchemy,
    create_engine,
    create_session_maker,
    create_tables,
)
from portal_link_config.settings import Settings

pytestmark = pytest.mark.integration


@pytest.fixture
async def sqlalchemy_factory():
    settings = Settings(
        jwt_secret_key="constraint-test-secret",
        database_url_override="sqlite+aiosqlite:///:memory:",
    )
    engine = create_engine(settings)
    await create_tables(engine)
    yield SQLAlchemyRepositoryFactory(create_session_maker(engine))
    await engine.dispose()


@pytest.fixture
async def user_ids(sqlalchemy_factory) -> tuple[int, int]:
    repo = sqlalchemy_factory.user_repository()
    ids = []
    for email in ("owner@example.com", "other@example.com"):
        user = User.create(name="User", email=email, password_hash="x")
        await repo.create(user)
        ids.append(user.id)
    return ids[0], ids[1]


@pytest.fixture
def skip_slug_check(monkeypatch):
    monkeypatch.setattr(
        PortalPageRepositorySQLAlchemy,
        "_slug_owner",
        staticmethod(AsyncMock(return_value=None)),
    )


class TestSlugConstraint:
    async def test_create_with_taken_slug(
        self,
        sqlalchemy_factory,
        user_ids,
        skip_slug_check,
    ):
        owner_id, other_id = user_ids
        repo = sqlalchemy_factory.portal_page_repository()
        await repo.create(PortalPage.create(user_id=owner_id, slug="taken", title="A"))
        late = PortalPage.create(user_id=other_id, slug="taken", title="B")

        with pytest.raises(SlugAlreadyExistsError):
            await repo.create(late)

        assert late.id == 0
        assert await repo.list_by_user_id(other_id) == []

    async def test_update_to_taken_slug(
        self,
        sqlalchemy_factory,
        user_ids,
        skip_slug_check,
    ):
        owner_id, other_id = user_ids
        repo = sqlalchemy_factory.portal_page_repository()
        mine = PortalPage.create(user_id=owner_id, slug="mine", title="Mine")
        await repo.create(mine)
        await repo.create(
            PortalPage.create(user_id=other_id, slug="theirs", title="Theirs"),
        )

        mine.update_details(slug="theirs", title="Renamed")
        with pytest.raises(SlugAlreadyExistsError):
            await repo.update(mine)

        stored = await repo.find_by_id(mine.id)
        assert stored.slug == "mine"
        assert stored.title == "Mine"


class TestEmailConstraint:
    async def test_create_with_taken_email(self, sqlalchemy_factory, monkeypatch):
        monkeypatch.setattr(
            UserRepositorySQLAlchemy,
            "_email_owner",
            staticmethod(AsyncMock(return_value=None)),
        )
        repo = sqlalchemy_factory.user_repository()
        await repo.create(
            User.create(name="John", email="john@example.com", password_hash="x"),
        )

        with pytest.raises(EmailAlreadyExistsError):
            await repo.create(
                User.create(name="Other", email="john@example.com", password_hash="y"),
            )
