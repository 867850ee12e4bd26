from portal_link.application.commands.user.sign_in_command import SignInCommand
from portal_link.application.commands.user.sign_up_command import SignUpCommand

__all__ = [
    "SignInCommand",
    "SignUpCommand",
]
