"""Portal Link Auth - generic authentication infrastructure.

This package is independent of the portal page domain. It handles:
- Password hashing (bcrypt)
- Signed access token creation and verification (JWT)

Usage:
    from portal_link_auth import AccessTokenService, PasswordHashingService
"""

from portal_link_auth.exceptions import AuthError, InvalidTokenError
from portal_link_auth.schemas import TokenPayload
from portal_link_auth.services import AccessTokenService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "AccessTokenService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
]
