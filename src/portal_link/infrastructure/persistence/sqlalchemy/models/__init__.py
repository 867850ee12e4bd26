"""SQLAlchemy models for persistence layer."""

from portal_link.infrastructure.persistence.sqlalchemy.models.base import Base
from portal_link.infrastructure.persistence.sqlalchemy.models.link_model import (
    LinkModel,
)
from portal_link.infrastructure.persistence.sqlalchemy.models.portal_page_model import (  # NOQA: E501
    PortalPageModel,
)
from portal_link.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "Base",
    "LinkModel",
    "PortalPageModel",
    "UserModel",
]
