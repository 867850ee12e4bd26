"""Tests for the PortalPage aggregate."""

from datetime import datetime, timezone

import pytest

from portal_link.domain.portal_page import (
    InvalidPortalPageError,
    LinkNotFoundError,
    PortalPage,
    Theme,
)

TEST_USER_ID = 1


def _make_page(**overrides) -> PortalPage:
    params = {
        "user_id": TEST_USER_ID,
        "slug": "john-doe",
        "title": "John Doe",
    }
    params.update(overrides)
    return PortalPage.create(**params)


class TestPortalPageCreation:
    def test_create_with_defaults(self):
        page = _make_page()

        assert page.id == 0
        assert page.user_id == TEST_USER_ID
        assert page.slug == "john-doe"
        assert page.title == "John Doe"
        assert page.bio == ""
        assert page.profile_image_url == ""
        assert page.theme is Theme.LIGHT
        assert page.links == []

    def test_create_normalizes_slug(self):
        assert _make_page(slug="John-Doe").slug == "john-doe"

    def test_create_with_dark_theme(self):
        assert _make_page(theme="dark").theme is Theme.DARK

    def test_empty_theme_falls_back_to_default(self):
        assert _make_page(theme="").theme is Theme.LIGHT

    @pytest.mark.parametrize(
        "overrides",
        [
            {"slug": "ab"},
            {"slug": "admin"},
            {"title": ""},
            {"title": "t" * 101},
            {"bio": "b" * 501},
            {"profile_image_url": "me.png"},
            {"theme": "blue"},
        ],
    )
    def test_create_rejects_invalid_fields(self, overrides):
        with pytest.raises(InvalidPortalPageError):
            _make_page(**overrides)

    def test_ownership(self):
        page = _make_page()

        assert page.is_owned_by(TEST_USER_ID) is True
        assert page.is_owned_by(TEST_USER_ID + 1) is False


class TestPortalPageLinks:
    def test_add_link(self):
        page = _make_page()

        link = page.add_link("Blog", "https://example.com/blog", display_order=1)

        assert page.links == [link]
        assert link.is_new is True

    def test_add_link_keeps_client_id(self):
        page = _make_page()

        link = page.add_link("Blog", "https://example.com", link_id=42)

        assert link.id == 42

    def test_add_invalid_link_leaves_page_unchanged(self):
        page = _make_page()

        with pytest.raises(InvalidPortalPageError):
            page.add_link("Blog", "https://example.com", display_order=0)

        assert page.links == []

    def test_links_property_returns_copy_of_collection(self):
        page = _make_page()
        page.add_link("Blog", "https://example.com")

        page.links.clear()

        assert len(page.links) == 1

    def test_sorted_links_by_display_order(self):
        page = _make_page()
        page.add_link("Second", "https://example.com/2", display_order=2)
        page.add_link("First", "https://example.com/1", display_order=1)
        page.add_link("Third", "https://example.com/3", display_order=3)

        titles = [link.title for link in page.sorted_links()]

        assert titles == ["First", "Second", "Third"]

    def test_update_and_remove_link(self):
        page = _make_page()
        page.add_link("Blog", "https://example.com", link_id=5)

        page.update_link(5, title="Journal")
        assert page.find_link(5).title == "Journal"

        page.remove_link(5)
        assert page.links == []

    def test_unknown_link_raises(self):
        page = _make_page()

        with pytest.raises(LinkNotFoundError):
            page.find_link(99)
        with pytest.raises(LinkNotFoundError):
            page.remove_link(99)

    def test_clear_links(self):
        page = _make_page()
        page.add_link("Blog", "https://example.com")
        page.add_link("Shop", "https://example.com/shop", display_order=2)

        page.clear_links()

        assert page.links == []


class TestPortalPageUpdateDetails:
    def test_empty_values_leave_fields_unchanged(self):
        page = _make_page(bio="Photographer", theme="dark")

        page.update_details(title="Jane Doe")

        assert page.title == "Jane Doe"
        assert page.slug == "john-doe"
        assert page.bio == "Photographer"
        assert page.theme is Theme.DARK

    def test_slug_is_normalized_on_update(self):
        page = _make_page()

        page.update_details(slug="Jane-Doe")

        assert page.slug == "jane-doe"

    def test_invalid_update_changes_nothing(self):
        page = _make_page()

        with pytest.raises(InvalidPortalPageError):
            page.update_details(title="New", theme="purple")

        assert page.title == "John Doe"


class TestPortalPageReconstitution:
    def test_reconstitute_keeps_identity_and_timestamps(self):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        updated = datetime(2024, 3, 1, tzinfo=timezone.utc)

        page = PortalPage.reconstitute(
            id=10,
            user_id=2,
            slug="jane",
            title="Jane",
            bio="",
            profile_image_url="",
            theme="dark",
            created_at=created,
            updated_at=updated,
        )

        assert page.id == 10
        assert page.theme is Theme.DARK
        assert page.created_at == created
        assert page.updated_at == updated
