from portal_link.application.dtos.auth_dto import AccessTokenDTO
from portal_link.application.dtos.portal_page_dto import (
    LinkDTO,
    LinkInput,
    PortalPageDTO,
    PortalPageSummaryDTO,
)

__all__ = [
    "AccessTokenDTO",
    "LinkDTO",
    "LinkInput",
    "PortalPageDTO",
    "PortalPageSummaryDTO",
]
