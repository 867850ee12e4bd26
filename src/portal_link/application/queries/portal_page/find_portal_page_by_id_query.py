"""Owner view of a single portal page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from portal_link.application.dtos import PortalPageDTO
from portal_link.domain.portal_page import (
    InvalidPortalPageError,
    PortalPageAccessDeniedError,
    PortalPageNotFoundError,
    PortalPageRepository,
)

if TYPE_CHECKING:
    from portal_link.application.factories import RepositoryFactory


class FindPortalPageByIdQuery:
    """Load a page by id for its owner."""

    def __init__(self, portal_page_repository: PortalPageRepository):
        self._portal_page_repo = portal_page_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> FindPortalPageByIdQuery:
        return cls(portal_page_repository=factory.portal_page_repository())

    async def execute(self, user_id: int, portal_page_id: int) -> PortalPageDTO:
        """
        Return the full page with links in ascending display order.

        Raises
        ------
        InvalidPortalPageError
            If either id is not positive
        PortalPageNotFoundError
            If the page does not exist
        PortalPageAccessDeniedError
            If the requester does not own the page
        """
        if user_id <= 0:
            raise InvalidPortalPageError("User id must be a positive integer")
        if portal_page_id <= 0:
            msg = "Portal page id must be a positive integer"
            raise InvalidPortalPageError(msg)

        portal_page = await self._portal_page_repo.find_by_id(portal_page_id)
        if portal_page is None:
            raise PortalPageNotFoundError(portal_page_id=portal_page_id)

        if not portal_page.is_owned_by(user_id):
            raise PortalPageAccessDeniedError(portal_page_id, user_id)

        return PortalPageDTO.from_aggregate(portal_page)
