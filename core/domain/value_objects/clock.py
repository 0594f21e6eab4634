"""Wall clock used by the domain for timestamps."""
from datetime import datetime, timezone


def utcnow() -> datetime:
    """
    Current UTC time as a naive datetime.

    Timestamps are stored naive-in-UTC so they compare the same way on
    PostgreSQL and SQLite.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
