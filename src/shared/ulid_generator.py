"""
ULID (Universally Unique Lexicographically Sortable Identifier) generator.

Used for request IDs when the host does not supply an invocation ID, plus
the timestamp helpers shared by the HTTP functions.
"""

from datetime import datetime, timezone
from ulid import ULID


def generate_ulid() -> str:
    """
    Generate a new ULID for request tracking.

    Returns:
        str: ULID in string format (26 characters)

    Example:
        >>> ulid = generate_ulid()
        >>> print(ulid)
        '01JCK3Q7H8ZVXN3BARC9GWAEZM'
    """
    return str(ULID())


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    """
    Get current UTC time in ISO 8601 format with explicit offset.

    Returns:
        str: ISO 8601 timestamp (e.g., '2024-12-06T03:30:00.123456+00:00')
    """
    return utc_now().isoformat()
