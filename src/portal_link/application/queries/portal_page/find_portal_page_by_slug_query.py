"""Public view of a portal page by slug."""

from __future__ import annotations

from typing import TYPE_CHECKING

from portal_link.application.dtos import PortalPageDTO
from portal_link.domain.portal_page import (
    InvalidPortalPageError,
    PortalPageNotFoundError,
    PortalPageRepository,
)

if TYPE_CHECKING:
    from portal_link.application.factories import RepositoryFactory


class FindPortalPageBySlugQuery:
    """Load a page by slug. No ownership check: pages are public."""

    def __init__(self, portal_page_repository: PortalPageRepository):
        self._portal_page_repo = portal_page_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> FindPortalPageBySlugQuery:
        return cls(portal_page_repository=factory.portal_page_repository())

    async def execute(self, slug: str) -> PortalPageDTO:
        if not slug:
            raise InvalidPortalPageError("Slug is required", "slug")

        portal_page = await self._portal_page_repo.find_by_slug(slug)
        if portal_page is None:
            raise PortalPageNotFoundError(slug=slug)

        return PortalPageDTO.from_aggregate(portal_page)
