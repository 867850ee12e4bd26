"""Authentication services.

Provides password hashing and access token management.
"""

from portal_link_auth.services.password_service import PasswordHashingService
from portal_link_auth.services.token_service import AccessTokenService

__all__ = [
    "PasswordHashingService",
    "AccessTokenService",
]
