"""Create a new portal page for the current user."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from portal_link.domain.portal_page import (
    InvalidPortalPageError,
    PortalPage,
    PortalPageRepository,
    SlugAlreadyExistsError,
)

if TYPE_CHECKING:
    from portal_link.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreatePortalPageCommand:
    """Validate and create a portal page without links."""

    def __init__(self, portal_page_repository: PortalPageRepository):
        self._portal_page_repo = portal_page_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreatePortalPageCommand:
        return cls(portal_page_repository=factory.portal_page_repository())

    async def execute(  # NOQA: PLR0913
        self,
        user_id: int,
        slug: str,
        title: str,
        bio: str = "",
        profile_image_url: str = "",
        theme: str = "",
    ) -> int:
        """
        Create the page and return its new id.

        Raises
        ------
        InvalidPortalPageError
            If any field violates its validation rule
        SlugAlreadyExistsError
            If the slug is taken (checked up front and again on insert)
        """
        if user_id <= 0:
            msg = "User id must be a positive integer"
            raise InvalidPortalPageError(msg, "user_id")

        # Validates every field and normalizes the slug
        portal_page = PortalPage.create(
            user_id=user_id,
            slug=slug,
            title=title,
            bio=bio,
            profile_image_url=profile_image_url,
            theme=theme,
        )

        existing = await self._portal_page_repo.find_by_slug(portal_page.slug)
        if existing is not None:
            raise SlugAlreadyExistsError(portal_page.slug)

        await self._portal_page_repo.create(portal_page)

        logger.info(
            "User %s created portal page %s (ID: %s)",
            user_id,
            portal_page.slug,
            portal_page.id,
        )
        return portal_page.id
