"""Time utilities for local and UTC timestamp formatting."""

from datetime import datetime, timezone


def local_now() -> datetime:
    """Current local time as a naive datetime (the canonical instant form)."""
    return datetime.now()


def utc_now_z() -> str:
    """
    Get current UTC time as ISO 8601 string with Z suffix.

    Returns:
        ISO 8601 UTC timestamp ending with 'Z' (e.g., '2025-12-23T00:27:07.804867Z')
    """
    return to_utc_z(datetime.now(timezone.utc))


def to_utc_z(dt: datetime) -> str:
    """
    Convert datetime to ISO 8601 UTC string with Z suffix.

    Naive datetimes are taken to be local time.

    Example:
        >>> from datetime import datetime, timezone
        >>> to_utc_z(datetime(2025, 12, 23, 0, 27, 7, tzinfo=timezone.utc))
        '2025-12-23T00:27:07Z'
    """
    dt_utc = dt.astimezone(timezone.utc)
    return dt_utc.isoformat().replace('+00:00', 'Z')


def to_utc_seconds_text(dt: datetime) -> str:
    """
    Render a datetime as 'YYYY-MM-DD HH:MM:SS' in UTC.

    Naive datetimes are taken to be local time.
    """
    dt_utc = dt.astimezone(timezone.utc)
    return (
        f"{dt_utc.year:04d}-{dt_utc.month:02d}-{dt_utc.day:02d} "
        f"{dt_utc.hour:02d}:{dt_utc.minute:02d}:{dt_utc.second:02d}"
    )
