"""In-memory implementation of UserRepository."""

import asyncio
import copy
import logging
from typing import Optional, Union

from portal_link.domain.shared.time import utc_now
from portal_link.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
)

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """Dict-backed user store with an email index."""

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._users: dict[int, User] = {}
        self._email_index: dict[str, int] = {}
        self._next_id = 1

    async def create(self, user: User) -> None:
        async with self._lock:
            if user.email in self._email_index:
                raise EmailAlreadyExistsError(user.email)

            now = utc_now()
            user.assign_identity(self._next_id, now, now)
            self._next_id += 1

            self._users[user.id] = copy.deepcopy(user)
            self._email_index[user.email] = user.id

        logger.info("Created user: %s (email: %s)", user.id, user.email)

    async def find_by_id(self, user_id: int) -> Optional[User]:
        async with self._lock:
            user = self._users.get(user_id)
            return copy.deepcopy(user) if user is not None else None

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        async with self._lock:
            user_id = self._email_index.get(email_value)
            if user_id is None:
                return None
            return copy.deepcopy(self._users[user_id])
