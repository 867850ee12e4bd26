"""List the portal pages owned by a user."""

from __future__ import annotations

from typing import TYPE_CHECKING

from portal_link.application.dtos import PortalPageSummaryDTO
from portal_link.domain.portal_page import (
    InvalidPortalPageError,
    PortalPageRepository,
)

if TYPE_CHECKING:
    from portal_link.application.factories import RepositoryFactory


class ListPortalPagesQuery:
    """Summaries (id, slug, title) in order of creation."""

    def __init__(self, portal_page_repository: PortalPageRepository):
        self._portal_page_repo = portal_page_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListPortalPagesQuery:
        return cls(portal_page_repository=factory.portal_page_repository())

    async def execute(self, user_id: int) -> list[PortalPageSummaryDTO]:
        if user_id <= 0:
            raise InvalidPortalPageError("User id must be a positive integer")

        pages = await self._portal_page_repo.list_by_user_id(user_id)
        return [PortalPageSummaryDTO.from_aggregate(page) for page in pages]
