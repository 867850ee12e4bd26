from portal_link.application.queries.portal_page.find_portal_page_by_id_query import (
    FindPortalPageByIdQuery,
)
from portal_link.application.queries.portal_page.find_portal_page_by_slug_query import (  # NOQA: E501
    FindPortalPageBySlugQuery,
)
from portal_link.application.queries.portal_page.list_portal_pages_query import (
    ListPortalPagesQuery,
)

__all__ = [
    "FindPortalPageByIdQuery",
    "FindPortalPageBySlugQuery",
    "ListPortalPagesQuery",
]
