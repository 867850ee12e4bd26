"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from portal_link.domain.shared.exceptions import (
    AuthenticationError,
    ConflictError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when an email address is empty, too long or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_PARAMS, {"field": "email"})


class InvalidUserNameError(ValidationError):
    """Raised when a display name is empty or too long."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_PARAMS, {"field": "name"})


class WeakPasswordError(ValidationError):
    """Raised when a password doesn't meet the password policy."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, ErrorCode.INVALID_PARAMS, {"field": "password"})


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        super().__init__(
            message=f"Email already registered: {email}",
            code=ErrorCode.EMAIL_EXISTS,
            details={"email": email},
        )
        self.email = email


class InvalidCredentialsError(AuthenticationError):
    """Raised when email or password is incorrect during sign-in."""

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message, ErrorCode.INVALID_CREDENTIALS)
