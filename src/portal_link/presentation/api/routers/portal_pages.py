"""Portal page endpoints for the authenticated owner."""

import logging
from typing import Annotated

from fastapi import APIRouter, Path, status

from portal_link.application.commands.portal_page import (
    CreatePortalPageCommand,
    UpdatePortalPageCommand,
)
from portal_link.application.dtos import LinkInput, PortalPageDTO
from portal_link.application.queries.portal_page import (
    FindPortalPageByIdQuery,
    ListPortalPagesQuery,
)
from portal_link.domain.shared import MAX_ID
from portal_link.presentation.api.dependencies import CurrentUserId, RepoFactory
from portal_link.presentation.api.schemas.portal_pages import (
    LinkResponse,
    PortalPageCreateRequest,
    PortalPageIdResponse,
    PortalPageListResponse,
    PortalPageResponse,
    PortalPageSummaryResponse,
    PortalPageUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

PortalPageIdPath = Annotated[
    int,
    Path(ge=1, le=MAX_ID, description="Portal page id"),
]


def to_portal_page_response(dto: PortalPageDTO) -> PortalPageResponse:
    return PortalPageResponse(
        id=dto.id,
        slug=dto.slug,
        title=dto.title,
        bio=dto.bio,
        profile_image_url=dto.profile_image_url,
        theme=dto.theme,
        links=[
            LinkResponse(
                id=link.id,
                title=link.title,
                url=link.url,
                description=link.description,
                icon_url=link.icon_url,
                display_order=link.display_order,
            )
            for link in dto.links
        ],
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create portal page",
    responses={
        201: {"description": "Portal page created"},
        400: {"description": "Invalid input or slug already taken"},
        401: {"description": "Missing or invalid token"},
    },
)
async def create_portal_page(
    request: PortalPageCreateRequest,
    factory: RepoFactory,
    user_id: CurrentUserId,
) -> PortalPageIdResponse:
    """
    Create a new portal page without links.

    The slug is stored lowercase and must be unique across all pages.
    Theme defaults to `light`.
    """
    command = CreatePortalPageCommand.from_factory(factory)
    portal_page_id = await command.execute(
        user_id=user_id,
        slug=request.slug,
        title=request.title,
        bio=request.bio,
        profile_image_url=request.profile_image_url,
        theme=request.theme,
    )
    return PortalPageIdResponse(id=portal_page_id)


@router.put(
    "/{portal_page_id}",
    summary="Update portal page",
    responses={
        200: {"description": "Portal page updated"},
        400: {"description": "Invalid input or slug already taken"},
        401: {"description": "Missing or invalid token"},
        403: {"description": "Portal page belongs to another user"},
        404: {"description": "Portal page not found"},
    },
)
async def update_portal_page(
    portal_page_id: PortalPageIdPath,
    request: PortalPageUpdateRequest,
    factory: RepoFactory,
    user_id: CurrentUserId,
) -> PortalPageIdResponse:
    """
    Update profile fields and replace the page's links.

    **Links are replaced, not merged.** The submitted `links` list becomes
    the complete set of links:

    - a link with the `id` of an existing link updates that link
    - a link without `id` (or `id: 0`) is created
    - every existing link that is not resubmitted is **deleted**

    Clients must therefore resend unchanged links too. Omitting `links`
    removes all links. Empty profile fields keep their current value.
    """
    command = UpdatePortalPageCommand.from_factory(factory)
    updated_id = await command.execute(
        user_id=user_id,
        portal_page_id=portal_page_id,
        slug=request.slug,
        title=request.title,
        bio=request.bio,
        profile_image_url=request.profile_image_url,
        theme=request.theme,
        links=[
            LinkInput(
                id=link.id,
                title=link.title,
                url=link.url,
                description=link.description,
                icon_url=link.icon_url,
                display_order=link.display_order,
            )
            for link in request.links
        ],
    )
    return PortalPageIdResponse(id=updated_id)


@router.get(
    "",
    summary="List my portal pages",
    responses={
        200: {"description": "Pages in order of creation (without links)"},
        401: {"description": "Missing or invalid token"},
    },
)
async def list_portal_pages(
    factory: RepoFactory,
    user_id: CurrentUserId,
) -> PortalPageListResponse:
    """List the current user's portal pages (id, slug and title only)."""
    query = ListPortalPagesQuery.from_factory(factory)
    summaries = await query.execute(user_id=user_id)
    return PortalPageListResponse(
        portal_pages=[
            PortalPageSummaryResponse(id=s.id, slug=s.slug, title=s.title)
            for s in summaries
        ],
    )


@router.get(
    "/{portal_page_id}",
    summary="Get my portal page",
    responses={
        200: {"description": "Portal page with links"},
        401: {"description": "Missing or invalid token"},
        403: {"description": "Portal page belongs to another user"},
        404: {"description": "Portal page not found"},
    },
)
async def get_portal_page(
    portal_page_id: PortalPageIdPath,
    factory: RepoFactory,
    user_id: CurrentUserId,
) -> PortalPageResponse:
    """Get one of the current user's pages with links in display order."""
    query = FindPortalPageByIdQuery.from_factory(factory)
    dto = await query.execute(user_id=user_id, portal_page_id=portal_page_id)
    return to_portal_page_response(dto)
