"""Integer identity bounds.

Ids and link positions are stored in 32-bit signed integer columns.
"""

MAX_ID = 2**31 - 1


def is_storable_id(value: int) -> bool:
    """True for persisted ids (1 through MAX_ID)."""
    return 0 < value <= MAX_ID
