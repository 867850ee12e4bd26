"""User domain: accounts that own portal pages."""

from portal_link.domain.user.aggregates import User
from portal_link.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    InvalidEmailError,
    InvalidUserNameError,
    WeakPasswordError,
)
from portal_link.domain.user.repositories import UserRepository
from portal_link.domain.user.value_objects import (
    Email,
    check_new_password,
    check_password_shape,
)

__all__ = [
    "User",
    "Email",
    "UserRepository",
    "check_new_password",
    "check_password_shape",
    "EmailAlreadyExistsError",
    "InvalidCredentialsError",
    "InvalidEmailError",
    "InvalidUserNameError",
    "WeakPasswordError",
]
