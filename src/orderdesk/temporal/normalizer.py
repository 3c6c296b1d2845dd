"""Order date normalization for the edit form and the outgoing payload.

``to_instant`` reduces any accepted order date shape to a naive local
``datetime``. It never raises: anything it cannot read becomes the current
time. ``to_editable_text`` and ``to_wire_text`` render that instant for the
date/time input control and for the backend respectively.
"""

import json
import math
from datetime import datetime, timedelta
from typing import Any, Optional

from dateutil import parser as dateutil_parser

from ..utils import time as time_utils
from ..utils.coerce import to_number
from ..utils.logging import get_logger
from .models import EpochDate, NativeDate, PartsDate, TextDate, classify_date

logger = get_logger(__name__)


def _as_local(dt: datetime) -> datetime:
    """Drop tzinfo after converting an aware datetime to local time."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone().replace(tzinfo=None)


def _parse_iso(text: str) -> Optional[datetime]:
    try:
        return _as_local(datetime.fromisoformat(text))
    except (ValueError, OverflowError):
        return None


def _parse_calendar_text(text: str) -> Optional[datetime]:
    """General-purpose parse of free-form date text."""
    try:
        return _as_local(dateutil_parser.parse(text))
    except (ValueError, OverflowError):
        return None


def _instant_from_text(text: str) -> Optional[datetime]:
    # Cleaned text is only tried when it still carries a date/time separator;
    # the untouched original always gets the second attempt.
    cleaned = text.split(".", 1)[0].replace("Z", "", 1)
    if "T" in cleaned:
        parsed = _parse_iso(cleaned)
        if parsed is not None:
            return parsed
    return _parse_calendar_text(text)


def _instant_from_epoch(epoch: EpochDate) -> Optional[datetime]:
    try:
        return datetime.fromtimestamp(epoch.milliseconds / 1000)
    except (ValueError, OverflowError, OSError):
        return None


def _whole(value: Any) -> int:
    number = to_number(value)
    if not math.isfinite(number):
        raise ValueError(f"Not a number: {value!r}")
    return int(number)


def _instant_from_parts(parts: PartsDate) -> Optional[datetime]:
    if parts.has_calendar_date:
        try:
            year = _whole(parts.year)
            month_index = _whole(parts.month) - 1
            day = _whole(parts.day)
            hour = _whole(parts.hour if parts.hour is not None else 0)
            minute = _whole(parts.minute if parts.minute is not None else 0)
            second = _whole(parts.second if parts.second is not None else 0)
            # Out-of-range components roll into the next unit (month 13 is
            # January of the following year, day 0 is the previous month's last).
            month_start = datetime(year + month_index // 12, month_index % 12 + 1, 1)
            return month_start + timedelta(days=day - 1, hours=hour, minutes=minute, seconds=second)
        except (ValueError, OverflowError):
            return None
    try:
        serialized = json.dumps(parts.raw)
    except (TypeError, ValueError):
        return None
    return _instant_from_text(serialized)


def to_instant(value: Any) -> datetime:
    """
    Normalize an order date of any accepted shape to a local instant.

    Resolution:
        - None -> now
        - text -> ISO parse of the cleaned text (when it contains 'T'), then a
          calendar parse of the original text, then now
        - number -> seconds below 10^12, milliseconds otherwise
        - datetime -> returned as-is
        - structured parts -> built from year/month/day (+ time), month 1-based;
          otherwise the JSON form is parsed as text
        - anything else -> now

    Args:
        value: Raw orderDate or an already-classified date variant

    Returns:
        Naive local datetime
    """
    date_value = classify_date(value)
    instant: Optional[datetime] = None

    if isinstance(date_value, NativeDate):
        return date_value.value
    if isinstance(date_value, TextDate):
        instant = _instant_from_text(date_value.text)
    elif isinstance(date_value, EpochDate):
        instant = _instant_from_epoch(date_value)
    elif isinstance(date_value, PartsDate):
        instant = _instant_from_parts(date_value)

    if instant is None:
        if value is not None:
            logger.debug("Could not normalize order date %r, using current time", value)
        return time_utils.local_now()
    return instant


def to_editable_text(instant: datetime) -> str:
    """Render 'YYYY-MM-DDTHH:MM' for a datetime-local input control."""
    return (
        f"{instant.year:04d}-{instant.month:02d}-{instant.day:02d}"
        f"T{instant.hour:02d}:{instant.minute:02d}"
    )


def to_wire_text(instant: datetime) -> str:
    """Render 'YYYY-MM-DDTHH:MM:SS', the format the backend accepts on write."""
    return f"{to_editable_text(instant)}:{instant.second:02d}"


def parse_editable_text(text: Any) -> Optional[datetime]:
    """
    Read back the value of the date/time input control.

    Returns:
        Local datetime, or None when the text is empty or not a date
    """
    if not isinstance(text, str) or not text.strip():
        return None
    return _parse_iso(text.strip())
