"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from portal_link.domain.user.aggregates.user import User
from portal_link.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def create(self, user: User) -> None:
        """
        Persist a new user.

        The generated id and timestamps are written back into ``user``.

        Raises
        ------
        EmailAlreadyExistsError
            If the email is already registered
        """

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find a user by their ID.

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """
        Find a user by their email address (normalized to lowercase).

        Returns
        -------
        User if found, None otherwise

        Raises
        ------
        InvalidEmailError
            If email format is invalid
        """
