"""Shared domain kernel: error taxonomy and time helpers."""

from portal_link.domain.shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from portal_link.domain.shared.identity import MAX_ID, is_storable_id
from portal_link.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "MAX_ID",
    "ValidationError",
    "ensure_tz_aware",
    "is_storable_id",
    "utc_now",
]
