from portal_link.domain.portal_page.repositories.portal_page_repository import (
    PortalPageRepository,
)

__all__ = ["PortalPageRepository"]
