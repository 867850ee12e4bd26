from portal_link.domain.portal_page.aggregates.portal_page import PortalPage

__all__ = ["PortalPage"]
