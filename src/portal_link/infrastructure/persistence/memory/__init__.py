"""In-memory repositories for development and tests."""

from portal_link.infrastructure.persistence.memory.portal_page_repository import (
    InMemoryPortalPageRepository,
)
from portal_link.infrastructure.persistence.memory.repository_factory import (
    InMemoryRepositoryFactory,
)
from portal_link.infrastructure.persistence.memory.user_repository import (
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryPortalPageRepository",
    "InMemoryRepositoryFactory",
    "InMemoryUserRepository",
]
