"""Data classes shared by the authentication services."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenPayload:
    """Decoded contents of a verified access token."""

    user_id: int
    issued_at: datetime
    exp: datetime
