"""Repository factory backed by process-local dictionaries."""

from portal_link.domain.portal_page import PortalPageRepository
from portal_link.domain.user import UserRepository
from portal_link.infrastructure.persistence.memory.portal_page_repository import (
    InMemoryPortalPageRepository,
)
from portal_link.infrastructure.persistence.memory.user_repository import (
    InMemoryUserRepository,
)


class InMemoryRepositoryFactory:
    """Hands out the same store instances for the lifetime of the factory."""

    def __init__(self) -> None:
        self._portal_pages = InMemoryPortalPageRepository()
        self._users = InMemoryUserRepository()

    def portal_page_repository(self) -> PortalPageRepository:
        return self._portal_pages

    def user_repository(self) -> UserRepository:
        return self._users
