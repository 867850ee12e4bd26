"""Tests for the Theme value object."""

import pytest

from portal_link.domain.portal_page import InvalidPortalPageError, Theme


class TestTheme:
    def test_default_is_light(self):
        assert Theme.default() is Theme.LIGHT

    @pytest.mark.parametrize("value", [None, ""])
    def test_parse_empty_means_not_provided(self, value):
        assert Theme.parse(value) is None

    def test_parse_known_values(self):
        assert Theme.parse("light") is Theme.LIGHT
        assert Theme.parse("dark") is Theme.DARK
        assert Theme.parse(Theme.DARK) is Theme.DARK

    @pytest.mark.parametrize("value", ["blue", "Dark", "LIGHT"])
    def test_parse_rejects_unknown_values(self, value):
        with pytest.raises(InvalidPortalPageError) as exc_info:
            Theme.parse(value)

        assert exc_info.value.field == "theme"
