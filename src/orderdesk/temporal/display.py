"""Read-only order date formatting for table cells and search text.

Display must never fail or block rendering, so this is a string transform
wherever possible: text is trimmed and reshaped without reparsing, and
structured dates are rendered from their parts without building a datetime.
"""

import json
import math
from datetime import datetime, timezone
from typing import Any

from ..utils.coerce import to_text
from ..utils.time import to_utc_seconds_text
from .models import EpochDate, NativeDate, PartsDate, TextDate, classify_date


def _pad2(value: Any) -> str:
    return to_text(value).rjust(2, "0")


def _display_text(text: str) -> str:
    shown = text.split(".", 1)[0].replace("Z", "", 1)
    return shown.replace("T", " ", 1) if "T" in shown else shown


def _display_epoch(epoch: EpochDate) -> str:
    try:
        moment = datetime.fromtimestamp(epoch.milliseconds / 1000, tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return to_text(epoch.value)
    return to_utc_seconds_text(moment)


def _display_native(moment: datetime) -> str:
    try:
        return to_utc_seconds_text(moment)
    except (ValueError, OverflowError, OSError):
        return moment.isoformat(sep=" ", timespec="seconds")


def _display_parts(parts: PartsDate) -> str:
    if parts.has_calendar_date:
        hour = parts.hour if parts.hour is not None else 0
        minute = parts.minute if parts.minute is not None else 0
        second = parts.second if parts.second is not None else 0
        return (
            f"{to_text(parts.year)}-{_pad2(parts.month)}-{_pad2(parts.day)} "
            f"{_pad2(hour)}:{_pad2(minute)}:{_pad2(second)}"
        )
    try:
        return json.dumps(parts.raw, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError):
        return str(parts.raw)


def to_display_text(value: Any) -> str:
    """
    Format an order date of any shape as 'YYYY-MM-DD HH:MM:SS'-like text.

    Unlike ``to_instant`` this never consults a calendar parser: text that is
    not a date is passed through after trimming fractional seconds and 'Z'.
    Epoch numbers and datetimes are shown in UTC.

    Args:
        value: Raw orderDate or an already-classified date variant

    Returns:
        Display string; empty for missing values
    """
    date_value = classify_date(value)

    if isinstance(date_value, TextDate):
        return _display_text(date_value.text)
    if isinstance(date_value, EpochDate):
        if isinstance(date_value.value, float) and math.isnan(date_value.value):
            return ""
        return _display_epoch(date_value)
    if isinstance(date_value, NativeDate):
        return _display_native(date_value.value)
    if isinstance(date_value, PartsDate):
        return _display_parts(date_value)
    if date_value.value is None or date_value.value is False:
        return ""
    return to_text(date_value.value)
