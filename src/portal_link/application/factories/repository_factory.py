"""Repository factory protocol for application layer."""

from typing import Protocol

from portal_link.domain.portal_page import PortalPageRepository
from portal_link.domain.user import UserRepository


class RepositoryFactory(Protocol):
    """Protocol for handing out repositories to commands and queries.

    Implemented by the in-memory and the SQLAlchemy infrastructure.
    """

    def portal_page_repository(self) -> PortalPageRepository:
        """Get portal page repository."""
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...
