"""Slug value object.

A slug is the URL-safe public identifier of a portal page. Slugs are
normalized to lowercase before any rule is checked.
"""

import re
from dataclasses import dataclass

from portal_link.domain.portal_page.exceptions import InvalidPortalPageError

SLUG_MIN_LENGTH = 3
SLUG_MAX_LENGTH = 50

# Lowercase alphanumerics separated by single hyphens
SLUG_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")

# Path segments used by the application itself
RESERVED_SLUGS = frozenset(
    {
        "admin",
        "api",
        "static",
        "public",
        "auth",
        "login",
        "signup",
        "help",
        "about",
        "terms",
        "privacy",
    },
)


def normalize_slug(value: str) -> str:
    return value.lower()


@dataclass(frozen=True)
class Slug:
    """Value object representing a validated, lowercase slug."""

    value: str

    def __post_init__(self) -> None:
        normalized = normalize_slug(self.value or "")

        if not SLUG_MIN_LENGTH <= len(normalized) <= SLUG_MAX_LENGTH:
            msg = (
                f"Slug must be between {SLUG_MIN_LENGTH} and "
                f"{SLUG_MAX_LENGTH} characters"
            )
            raise InvalidPortalPageError(msg, field="slug")

        if not SLUG_PATTERN.match(normalized):
            msg = (
                "Slug may only contain lowercase letters, digits and single "
                "hyphens, and cannot start or end with a hyphen"
            )
            raise InvalidPortalPageError(msg, field="slug")

        if normalized in RESERVED_SLUGS:
            msg = f"Slug '{normalized}' is reserved"
            raise InvalidPortalPageError(msg, field="slug")

        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
