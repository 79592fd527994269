"""Time and datetime utilities."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current datetime in UTC."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Return `value` as an aware UTC datetime.

    Naive values are taken to already be UTC. Some database drivers
    (SQLite in particular) drop the offset on read.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
