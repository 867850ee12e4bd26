"""Unit tests for CreatePortalPageCommand."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from portal_link.application.commands.portal_page import CreatePortalPageCommand
from portal_link.domain.portal_page import (
    InvalidPortalPageError,
    PortalPage,
    SlugAlreadyExistsError,
    Theme,
)


def _make_mock_repo(assigned_id: int = 7) -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_slug.return_value = None

    async def _create(page: PortalPage) -> None:
        now = datetime.now(timezone.utc)
        page.assign_identity(assigned_id, now, now)

    repo.create.side_effect = _create
    return repo


class TestCreatePortalPageCommand:
    async def test_returns_assigned_id(self):
        repo = _make_mock_repo(assigned_id=7)
        command = CreatePortalPageCommand(portal_page_repository=repo)

        page_id = await command.execute(
            user_id=1,
            slug="John-Doe",
            title="John Doe",
            bio="Photographer",
        )

        assert page_id == 7
        created: PortalPage = repo.create.call_args.args[0]
        assert created.slug == "john-doe"
        assert created.user_id == 1
        assert created.bio == "Photographer"
        assert created.theme is Theme.LIGHT
        assert created.links == []

    async def test_checks_normalized_slug_before_insert(self):
        repo = _make_mock_repo()
        command = CreatePortalPageCommand(portal_page_repository=repo)

        await command.execute(user_id=1, slug="JOHN-DOE", title="John")

        repo.find_by_slug.assert_awaited_once_with("john-doe")

    async def test_taken_slug(self):
        repo = _make_mock_repo()
        repo.find_by_slug.return_value = PortalPage.create(
            user_id=2,
            slug="john-doe",
            title="Someone else",
        )
        command = CreatePortalPageCommand(portal_page_repository=repo)

        with pytest.raises(SlugAlreadyExistsError):
            await command.execute(user_id=1, slug="john-doe", title="John")

        repo.create.assert_not_awaited()

    @pytest.mark.parametrize("user_id", [0, -1])
    async def test_requires_positive_user_id(self, user_id):
        repo = _make_mock_repo()
        command = CreatePortalPageCommand(portal_page_repository=repo)

        with pytest.raises(InvalidPortalPageError):
            await command.execute(user_id=user_id, slug="john-doe", title="John")

        repo.find_by_slug.assert_not_awaited()

    @pytest.mark.parametrize(
        "fields",
        [
            {"slug": "api", "title": "John"},
            {"slug": "john-doe", "title": ""},
            {"slug": "john-doe", "title": "John", "theme": "neon"},
            {"slug": "john-doe", "title": "John", "profile_image_url": "me.png"},
        ],
    )
    async def test_invalid_fields_never_reach_repository(self, fields):
        repo = _make_mock_repo()
        command = CreatePortalPageCommand(portal_page_repository=repo)

        with pytest.raises(InvalidPortalPageError):
            await command.execute(user_id=1, **fields)

        repo.create.assert_not_awaited()
