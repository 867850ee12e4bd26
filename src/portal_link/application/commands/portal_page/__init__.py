from portal_link.application.commands.portal_page.create_portal_page_command import (
    CreatePortalPageCommand,
)
from portal_link.application.commands.portal_page.update_portal_page_command import (
    UpdatePortalPageCommand,
)

__all__ = [
    "CreatePortalPageCommand",
    "UpdatePortalPageCommand",
]
