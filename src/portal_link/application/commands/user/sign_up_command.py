"""Register a new user and issue an access token."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from portal_link.application.dtos import AccessTokenDTO
from portal_link.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
    check_new_password,
)
from portal_link_auth import AccessTokenService, PasswordHashingService

if TYPE_CHECKING:
    from portal_link.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class SignUpCommand:
    """Create a user with a bcrypt-hashed password."""

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
    ) -> SignUpCommand:
        return cls(
            user_repository=factory.user_repository(),
            password_service=password_service,
            token_service=token_service,
        )

    async def execute(self, name: str, email: str, password: str) -> AccessTokenDTO:
        """
        Register the user and return a fresh access token.

        Raises
        ------
        InvalidUserNameError, InvalidEmailError, WeakPasswordError
            If the input fails validation
        EmailAlreadyExistsError
            If the email is already registered
        """
        User.validate_name(name)
        email_obj = Email(email)
        check_new_password(password)

        if await self._user_repo.find_by_email(email_obj) is not None:
            raise EmailAlreadyExistsError(email_obj.value)

        user = User.create(
            name=name,
            email=email_obj,
            password_hash=self._password_service.hash(password),
        )
        await self._user_repo.create(user)

        logger.info("User signed up: %s", user.id)
        return AccessTokenDTO(
            access_token=self._token_service.create_access_token(user.id),
            user_id=user.id,
        )
