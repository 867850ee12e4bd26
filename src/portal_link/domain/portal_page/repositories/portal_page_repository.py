"""Portal page repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from portal_link.domain.portal_page.aggregates.portal_page import PortalPage


class PortalPageRepository(ABC):
    """Repository interface for PortalPage aggregates.

    Implementations must be interchangeable: the same contract holds for
    the in-memory store and the relational store.
    """

    @abstractmethod
    async def create(self, portal_page: PortalPage) -> None:
        """
        Persist a new portal page together with its links.

        Generated ids and timestamps are written back into ``portal_page``
        and each of its links.

        Raises
        ------
        SlugAlreadyExistsError
            If another page already uses the slug
        """

    @abstractmethod
    async def update(self, portal_page: PortalPage) -> None:
        """
        Persist changes to an existing page, reconciling its links.

        The submitted link list is authoritative (full replace):

        - a link whose nonzero id matches a stored link updates that link
          and keeps its original creation time
        - a link with id 0, or an id that is not stored for this page, is
          inserted with a newly assigned id
        - every stored link missing from the submission is deleted

        The slug is re-checked for uniqueness only when it changed.

        Raises
        ------
        PortalPageNotFoundError
            If no page with ``portal_page.id`` exists
        SlugAlreadyExistsError
            If the new slug belongs to another page
        """

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[PortalPage]:
        """
        Find a page by slug (case-insensitive).

        Returns
        -------
        PortalPage with links sorted by ascending display order, None if absent
        """

    @abstractmethod
    async def find_by_id(self, portal_page_id: int) -> Optional[PortalPage]:
        """
        Find a page by id.

        Returns
        -------
        PortalPage with links sorted by ascending display order, None if absent
        """

    @abstractmethod
    async def list_by_user_id(self, user_id: int) -> list[PortalPage]:
        """
        List a user's pages without their links.

        Returns
        -------
        Pages ordered by ascending creation time; empty list if none
        """
