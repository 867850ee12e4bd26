"""Authenticate a user by email and password."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from portal_link.application.dtos import AccessTokenDTO
from portal_link.domain.user import (
    Email,
    InvalidCredentialsError,
    UserRepository,
    check_password_shape,
)
from portal_link_auth import AccessTokenService, PasswordHashingService

if TYPE_CHECKING:
    from portal_link.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class SignInCommand:
    """Verify credentials and issue an access token."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        token_service: AccessTokenService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._token_service = token_service

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        password_service: PasswordHashingService,
        token_service: AccessTokenService,
    ) -> SignInCommand:
        return cls(
            user_repository=factory.user_repository(),
            password_service=password_service,
            token_service=token_service,
        )

    async def execute(self, email: str, password: str) -> AccessTokenDTO:
        email_obj = Email(email)
        check_password_shape(password)

        user = await self._user_repo.find_by_email(email_obj)
        if user is None or not self._password_service.verify(
            password,
            user.password_hash,
        ):
            # Same error for unknown email and wrong password
            logger.warning("Failed sign-in for %s", email_obj.value)
            raise InvalidCredentialsError()

        logger.info("User signed in: %s", user.id)
        return AccessTokenDTO(
            access_token=self._token_service.create_access_token(user.id),
            user_id=user.id,
        )
