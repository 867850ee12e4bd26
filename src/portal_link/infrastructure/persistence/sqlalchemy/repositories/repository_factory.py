"""Repository factory backed by an async SQLAlchemy session maker."""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from portal_link.domain.portal_page import PortalPageRepository
from portal_link.domain.user import UserRepository
from portal_link.infrastructure.persistence.sqlalchemy.repositories.portal_page_repository import (  # NOQA: E501
    PortalPageRepositorySQLAlchemy,
)
from portal_link.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """Creates repositories that open one session per operation."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    def portal_page_repository(self) -> PortalPageRepository:
        return PortalPageRepositorySQLAlchemy(self._session_maker)

    def user_repository(self) -> UserRepository:
        return UserRepositorySQLAlchemy(self._session_maker)
