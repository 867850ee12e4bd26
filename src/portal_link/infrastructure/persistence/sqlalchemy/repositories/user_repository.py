"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional, Union

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from portal_link.domain.shared.identity import is_storable_id
from portal_link.domain.shared.time import ensure_tz_aware, utc_now
from portal_link.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
)
from portal_link.infrastructure.persistence.sqlalchemy.models import UserModel
from portal_link.infrastructure.persistence.sqlalchemy.repositories.errors import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def create(self, user: User) -> None:
        now = utc_now()
        model = UserModel(
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            created_at=now,
            updated_at=now,
        )

        try:
            async with self._session_maker() as session, session.begin():
                if await self._email_owner(session, user.email) is not None:
                    raise EmailAlreadyExistsError(user.email)

                session.add(model)
                await session.flush()
                user_id = model.id
        except IntegrityError as e:
            # Handle unique constraint violation on email
            if is_unique_violation(e, "email"):
                raise EmailAlreadyExistsError(user.email) from e
            raise

        user.assign_identity(user_id, now, now)
        logger.info("Created user: %s (email: %s)", user_id, user.email)

    async def find_by_id(self, user_id: int) -> Optional[User]:
        if not is_storable_id(user_id):
            return None
        stmt = select(UserModel).where(UserModel.id == user_id)
        async with self._session_maker() as session:
            model = (await session.execute(stmt)).scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        # Normalize email for lookup
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(UserModel.email == email_value)
        async with self._session_maker() as session:
            model = (await session.execute(stmt)).scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    @staticmethod
    async def _email_owner(session: AsyncSession, email: str) -> Optional[int]:
        stmt = select(UserModel.id).where(UserModel.email == email)
        return await session.scalar(stmt)

    @staticmethod
    def _map_to_domain(model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
