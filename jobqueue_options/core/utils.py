"""Shared datetime utilities.

Job start times are handed to the database as ISO-8601 strings in UTC.
Naive datetimes are assumed to already be UTC.
"""

from datetime import datetime, timezone


def to_aware_utc(dt: datetime) -> datetime:
    """Convert any datetime to timezone-aware UTC.

    This handles the conversion safely regardless of input type:
    - If naive: assumes UTC, adds tzinfo
    - If aware: converts to UTC

    Args:
        dt: A datetime object (naive or timezone-aware).

    Returns:
        A timezone-aware datetime object in UTC.

    Example:
        >>> from datetime import datetime
        >>> from jobqueue_options.core.utils import to_aware_utc
        >>> naive = datetime(2024, 1, 15, 10, 30)
        >>> aware = to_aware_utc(naive)
        >>> aware.tzinfo is not None
        True
        >>> aware.hour
        10
    """
    if dt.tzinfo is None:
        # Assume naive datetime is already UTC
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_iso_utc(dt: datetime) -> str:
    """Format a datetime as a UTC ISO-8601 string with millisecond precision.

    Example:
        >>> from datetime import datetime, timedelta, timezone
        >>> to_iso_utc(datetime(2024, 1, 15, 12, 30, tzinfo=timezone(timedelta(hours=2))))
        '2024-01-15T10:30:00.000Z'
    """
    return to_aware_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")
