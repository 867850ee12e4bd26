"""FastAPI dependency injection for the Portal Link API.

Provides dependencies for:
- Settings and the repository factory attached to the application
- Authentication services (password hashing, access tokens)
- The authenticated user id (from the bearer token)
"""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from portal_link.application.factories import RepositoryFactory
from portal_link_auth import (
    AccessTokenService,
    InvalidTokenError,
    PasswordHashingService,
)
from portal_link_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for bearer tokens
security = HTTPBearer(auto_error=False)


def get_api_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_api_settings)]


def get_repository_factory(request: Request) -> RepositoryFactory:
    """
    Get the repository factory shared by all requests.

    Either the in-memory or the SQLAlchemy factory, chosen in create_app().
    """
    return request.app.state.repository_factory


# Type alias for injected repository factory
RepoFactory = Annotated[RepositoryFactory, Depends(get_repository_factory)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_token_service(settings: SettingsDep) -> AccessTokenService:
    """Get access token service configured with API settings."""
    return AccessTokenService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.access_token_expire_hours,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


TokenServiceDep = Annotated[AccessTokenService, Depends(get_token_service)]
PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]


# -----------------------------------------------------------------------------
# Current User (Bearer Authentication)
# -----------------------------------------------------------------------------


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user_id(
    request: Request,
    factory: RepoFactory,
    token_service: TokenServiceDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> int:
    """
    FastAPI dependency resolving the authenticated user id.

    Verifies the bearer token, checks that the user still exists and
    stores the id on ``request.state.user_id``.

    Returns
    -------
    The authenticated user's id

    Raises
    ------
    HTTPException
        401 if token is missing, invalid, expired, or the user is gone
    """
    if credentials is None:
        raise _unauthorized("Authentication required")

    try:
        payload = token_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise _unauthorized("Invalid or expired token") from e

    user = await factory.user_repository().find_by_id(payload.user_id)
    if user is None:
        logger.warning("User not found for token: %s", payload.user_id)
        raise _unauthorized("User not found")

    request.state.user_id = user.id
    return user.id


# Type alias for injected current user id
CurrentUserId = Annotated[int, Depends(get_current_user_id)]
