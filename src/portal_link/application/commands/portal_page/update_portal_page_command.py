"""Update a portal page and replace its links."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from portal_link.application.dtos import LinkInput
from portal_link.domain.portal_page import (
    PortalPageAccessDeniedError,
    PortalPageNotFoundError,
    PortalPageRepository,
    Slug,
    SlugAlreadyExistsError,
    Theme,
)
from portal_link.domain.portal_page.rules import (
    validate_bio,
    validate_link_fields,
    validate_optional_url,
    validate_title,
)

if TYPE_CHECKING:
    from portal_link.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdatePortalPageCommand:
    """Apply profile overrides and a full replacement link list.

    The submitted links are authoritative: any stored link that is not
    resubmitted is deleted. Empty profile fields leave the stored value
    unchanged.
    """

    def __init__(self, portal_page_repository: PortalPageRepository):
        self._portal_page_repo = portal_page_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdatePortalPageCommand:
        return cls(portal_page_repository=factory.portal_page_repository())

    async def execute(  # NOQA: PLR0913
        self,
        user_id: int,
        portal_page_id: int,
        slug: str = "",
        title: str = "",
        bio: str = "",
        profile_image_url: str = "",
        theme: str = "",
        links: Sequence[LinkInput] = (),
    ) -> int:
        """
        Update the page and return its id.

        Raises
        ------
        PortalPageNotFoundError
            If the page does not exist
        PortalPageAccessDeniedError
            If the page belongs to another user
        InvalidPortalPageError
            If a provided field or any submitted link is invalid
        SlugAlreadyExistsError
            If the new slug is used by another page
        """
        portal_page = await self._portal_page_repo.find_by_id(portal_page_id)
        if portal_page is None:
            raise PortalPageNotFoundError(portal_page_id=portal_page_id)

        if not portal_page.is_owned_by(user_id):
            logger.warning(
                "User %s tried to update portal page %s owned by %s",
                user_id,
                portal_page_id,
                portal_page.user_id,
            )
            raise PortalPageAccessDeniedError(portal_page_id, user_id)

        new_slug = self._validate(slug, title, bio, profile_image_url, theme, links)

        if new_slug and new_slug != portal_page.slug:
            other = await self._portal_page_repo.find_by_slug(new_slug)
            if other is not None and other.id != portal_page.id:
                raise SlugAlreadyExistsError(new_slug)

        portal_page.update_details(
            slug=new_slug,
            title=title,
            bio=bio,
            profile_image_url=profile_image_url,
            theme=theme,
        )

        # Rebuild the collection; the repository reconciles it with storage
        portal_page.clear_links()
        for link in links:
            portal_page.add_link(
                title=link.title,
                url=link.url,
                description=link.description,
                icon_url=link.icon_url,
                display_order=link.display_order,
                link_id=link.id,
            )

        await self._portal_page_repo.update(portal_page)

        logger.info(
            "User %s updated portal page %s (%d links)",
            user_id,
            portal_page.id,
            len(links),
        )
        return portal_page.id

    @staticmethod
    def _validate(  # NOQA: PLR0913
        slug: str,
        title: str,
        bio: str,
        profile_image_url: str,
        theme: str,
        links: Sequence[LinkInput],
    ) -> str:
        """Validate every provided field and link before anything changes.

        Returns the normalized slug, or "" when no slug was provided.
        """
        new_slug = Slug(slug).value if slug else ""
        if title:
            validate_title(title)
        if bio:
            validate_bio(bio)
        validate_optional_url(profile_image_url, "profile_image_url")
        Theme.parse(theme)

        for link in links:
            validate_link_fields(
                title=link.title,
                url=link.url,
                description=link.description,
                icon_url=link.icon_url,
                display_order=link.display_order,
            )
        return new_slug
