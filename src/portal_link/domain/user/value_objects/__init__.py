from portal_link.domain.user.value_objects.email import Email
from portal_link.domain.user.value_objects.password import (
    check_new_password,
    check_password_shape,
)

__all__ = [
    "Email",
    "check_new_password",
    "check_password_shape",
]
