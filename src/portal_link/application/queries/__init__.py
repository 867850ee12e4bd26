"""Application queries (read operations)."""

from portal_link.application.queries.portal_page import (
    FindPortalPageByIdQuery,
    FindPortalPageBySlugQuery,
    ListPortalPagesQuery,
)

__all__ = [
    "FindPortalPageByIdQuery",
    "FindPortalPageBySlugQuery",
    "ListPortalPagesQuery",
]
