"""Theme value object for portal pages."""

from enum import Enum

from portal_link.domain.portal_page.exceptions import InvalidPortalPageError


class Theme(str, Enum):
    """Visual theme of a portal page."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def default(cls) -> "Theme":
        return cls.LIGHT

    @classmethod
    def parse(cls, value: "str | Theme | None") -> "Theme | None":
        """Parse an optional theme; empty input means "not provided"."""
        if value is None or value == "":
            return None
        if isinstance(value, Theme):
            return value
        try:
            return cls(value)
        except ValueError as e:
            valid = ", ".join(t.value for t in cls)
            msg = f"Theme must be one of: {valid}"
            raise InvalidPortalPageError(msg, field="theme") from e
