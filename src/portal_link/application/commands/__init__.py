"""Application commands (write operations)."""

from portal_link.application.commands.portal_page import (
    CreatePortalPageCommand,
    UpdatePortalPageCommand,
)
from portal_link.application.commands.user import SignInCommand, SignUpCommand

__all__ = [
    "CreatePortalPageCommand",
    "SignInCommand",
    "SignUpCommand",
    "UpdatePortalPageCommand",
]
