"""Portal page domain: the PortalPage aggregate and its links."""

from portal_link.domain.portal_page.aggregates import PortalPage
from portal_link.domain.portal_page.entities import Link
from portal_link.domain.portal_page.exceptions import (
    InvalidPortalPageError,
    LinkNotFoundError,
    PortalPageAccessDeniedError,
    PortalPageNotFoundError,
    SlugAlreadyExistsError,
)
from portal_link.domain.portal_page.repositories import PortalPageRepository
from portal_link.domain.portal_page.value_objects import (
    RESERVED_SLUGS,
    Slug,
    Theme,
    normalize_slug,
)

__all__ = [
    # Aggregates / entities
    "PortalPage",
    "Link",
    # Value objects
    "Slug",
    "Theme",
    "RESERVED_SLUGS",
    "normalize_slug",
    # Repositories
    "PortalPageRepository",
    # Exceptions
    "InvalidPortalPageError",
    "LinkNotFoundError",
    "PortalPageAccessDeniedError",
    "PortalPageNotFoundError",
    "SlugAlreadyExistsError",
]
