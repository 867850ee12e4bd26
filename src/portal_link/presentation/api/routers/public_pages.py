"""Public, unauthenticated portal page lookup."""

from fastapi import APIRouter

from portal_link.application.queries.portal_page import FindPortalPageBySlugQuery
from portal_link.presentation.api.dependencies import RepoFactory
from portal_link.presentation.api.routers.portal_pages import (
    to_portal_page_response,
)
from portal_link.presentation.api.schemas.portal_pages import PortalPageResponse

router = APIRouter()


@router.get(
    "/{slug}",
    summary="Get portal page by slug",
    responses={
        200: {"description": "Portal page with links"},
        404: {"description": "Portal page not found"},
    },
)
async def get_portal_page_by_slug(
    slug: str,
    factory: RepoFactory,
) -> PortalPageResponse:
    """Public page lookup. Slugs are matched case-insensitively."""
    query = FindPortalPageBySlugQuery.from_factory(factory)
    return to_portal_page_response(await query.execute(slug=slug))
