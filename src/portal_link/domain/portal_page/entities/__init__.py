from portal_link.domain.portal_page.entities.link import Link

__all__ = ["Link"]
