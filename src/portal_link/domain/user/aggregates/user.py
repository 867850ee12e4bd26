from datetime import datetime
from typing import Optional, Union

from portal_link.domain.shared.time import utc_now
from portal_link.domain.user.exceptions import InvalidUserNameError
from portal_link.domain.user.value_objects.email import Email

NAME_MAX_LENGTH = 255


class User:
    """
    User aggregate root.

    Holds identity and the bcrypt hash of the password. Users are created
    at sign-up and are not modified afterwards. An id of 0 marks a user
    that has not been persisted yet.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        id: int = 0,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        now = utc_now()
        self._id = id
        self._name = name
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._created_at = created_at or now
        self._updated_at = updated_at or now

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def assign_identity(
        self,
        id: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> None:
        self._id = id
        self._created_at = created_at
        self._updated_at = updated_at

    @staticmethod
    def validate_name(name: str) -> None:
        if not name:
            msg = "Name is required"
            raise InvalidUserNameError(msg)
        if len(name) > NAME_MAX_LENGTH:
            msg = f"Name must be at most {NAME_MAX_LENGTH} characters"
            raise InvalidUserNameError(msg)

    @classmethod
    def create(
        cls,
        name: str,
        email: Union[str, Email],
        password_hash: str,
    ) -> "User":
        cls.validate_name(name)
        return cls(name=name, email=email, password_hash=password_hash)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: int,
        name: str,
        email: str,
        password_hash: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self.email!r})"
