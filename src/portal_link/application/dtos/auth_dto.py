"""DTOs for sign-up and sign-in."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AccessTokenDTO:
    """Token issued after a successful sign-up or sign-in."""

    access_token: str
    user_id: int
    token_type: str = "bearer"
