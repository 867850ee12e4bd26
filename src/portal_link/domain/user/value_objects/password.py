"""Password policy for sign-up and sign-in."""

import re

from portal_link.domain.user.exceptions import WeakPasswordError

PASSWORD_MIN_LENGTH = 8
# bcrypt only looks at the first 72 bytes
PASSWORD_MAX_BYTES = 72

_HAS_LETTER = re.compile(r"[A-Za-z]")
_HAS_DIGIT = re.compile(r"[0-9]")


def check_password_shape(password: str) -> None:
    """Length rules only; used when signing in."""
    if not password or len(password) < PASSWORD_MIN_LENGTH:
        msg = f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
        raise WeakPasswordError(msg)
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        msg = f"Password cannot exceed {PASSWORD_MAX_BYTES} bytes"
        raise WeakPasswordError(msg)


def check_new_password(password: str) -> None:
    """
    Validate a password chosen at sign-up.

    Requirements:
    - at least 8 characters (and at most 72 bytes)
    - at least one letter
    - at least one digit

    Raises
    ------
    WeakPasswordError
        If any requirement is not met
    """
    check_password_shape(password)
    if not _HAS_LETTER.search(password):
        msg = "Password must contain at least one letter"
        raise WeakPasswordError(msg)
    if not _HAS_DIGIT.search(password):
        msg = "Password must contain at least one digit"
        raise WeakPasswordError(msg)
