"""Relational persistence using async SQLAlchemy."""

from portal_link.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_maker,
    create_tables,
    drop_tables,
)
from portal_link.infrastructure.persistence.sqlalchemy.models import Base
from portal_link.infrastructure.persistence.sqlalchemy.repositories import (
    PortalPageRepositorySQLAlchemy,
    SQLAlchemyRepositoryFactory,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "PortalPageRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserRepositorySQLAlchemy",
    "create_engine",
    "create_session_maker",
    "create_tables",
    "drop_tables",
]
