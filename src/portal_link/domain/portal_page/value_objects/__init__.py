"""Portal page value objects."""

from portal_link.domain.portal_page.value_objects.slug import (
    RESERVED_SLUGS,
    Slug,
    normalize_slug,
)
from portal_link.domain.portal_page.value_objects.theme import Theme

__all__ = [
    "RESERVED_SLUGS",
    "Slug",
    "Theme",
    "normalize_slug",
]
