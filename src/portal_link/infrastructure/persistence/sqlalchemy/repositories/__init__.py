"""SQLAlchemy repository implementations."""

from portal_link.infrastructure.persistence.sqlalchemy.repositories.portal_page_repository import (  # NOQA: E501
    PortalPageRepositorySQLAlchemy,
)
from portal_link.infrastructure.persistence.sqlalchemy.repositories.repository_factory import (  # NOQA: E501
    SQLAlchemyRepositoryFactory,
)
from portal_link.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    "PortalPageRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserRepositorySQLAlchemy",
]
