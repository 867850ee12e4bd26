"""Helpers for interpreting database integrity errors."""

from sqlalchemy.exc import IntegrityError


def is_unique_violation(error: IntegrityError, column: str) -> bool:
    """Check whether an IntegrityError is a unique violation on ``column``.

    Works on the driver messages of SQLite ("UNIQUE constraint failed:
    portal_pages.slug") and PostgreSQL ("duplicate key value violates
    unique constraint "portal_pages_slug_key"").
    """
    message = str(error.orig if error.orig is not None else error).lower()
    is_unique = "unique" in message or "duplicate key" in message
    return is_unique and column.lower() in message
