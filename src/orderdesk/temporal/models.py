"""Order date variants.

An order date arrives from the API in one of several shapes. ``classify_date``
sorts a raw value into exactly one variant so that the normalizer and the
display formatter dispatch on ``kind`` instead of probing the value.
"""

from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

YEAR_KEYS: Tuple[str, ...] = ("year", "Y", "y")
MONTH_KEYS: Tuple[str, ...] = ("month", "m")
DAY_KEYS: Tuple[str, ...] = ("day", "d")
HOUR_KEYS: Tuple[str, ...] = ("hour", "h")
MINUTE_KEYS: Tuple[str, ...] = ("minute", "min")
SECOND_KEYS: Tuple[str, ...] = ("second", "s")

EPOCH_MILLIS_THRESHOLD = 1e12


class TextDate(BaseModel):
    """ISO-like text, e.g. '2024-01-01T10:00:00.123Z'."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


class EpochDate(BaseModel):
    """Unix timestamp; seconds below 10^12, milliseconds otherwise."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["epoch"] = "epoch"
    value: Union[int, float]

    @property
    def milliseconds(self) -> float:
        return self.value * 1000 if self.value < EPOCH_MILLIS_THRESHOLD else self.value


class PartsDate(BaseModel):
    """Structured date with alias-resolved components.

    Components keep whatever type the API sent (ints, numeric strings, ...).
    ``raw`` is the original mapping, used when the parts do not resolve.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["parts"] = "parts"
    year: Any = None
    month: Any = None
    day: Any = None
    hour: Any = None
    minute: Any = None
    second: Any = None
    raw: Dict[Any, Any] = Field(default_factory=dict)

    @property
    def has_calendar_date(self) -> bool:
        return bool(self.year) and bool(self.month) and bool(self.day)


class NativeDate(BaseModel):
    """An already-constructed datetime."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["native"] = "native"
    value: datetime


class OpaqueDate(BaseModel):
    """Missing value or a shape no other variant accepts."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["opaque"] = "opaque"
    value: Any = None


OrderDate = Union[TextDate, EpochDate, PartsDate, NativeDate, OpaqueDate]

DATE_VARIANTS = (TextDate, EpochDate, PartsDate, NativeDate, OpaqueDate)


def _first_present(mapping: Mapping[Any, Any], keys: Tuple[str, ...]) -> Optional[Any]:
    """Value of the first key whose value is not None."""
    for key in keys:
        value = mapping.get(key)
        if value is not None:
            return value
    return None


def parts_from_mapping(mapping: Mapping[Any, Any]) -> PartsDate:
    return PartsDate(
        year=_first_present(mapping, YEAR_KEYS),
        month=_first_present(mapping, MONTH_KEYS),
        day=_first_present(mapping, DAY_KEYS),
        hour=_first_present(mapping, HOUR_KEYS),
        minute=_first_present(mapping, MINUTE_KEYS),
        second=_first_present(mapping, SECOND_KEYS),
        raw=dict(mapping),
    )


def classify_date(value: Any):
    """
    Classify a raw order date into its variant.

    Already-classified variants pass through unchanged. Booleans are not
    treated as numbers. A bare ``date`` is promoted to local midnight.

    Args:
        value: orderDate as delivered (str, int/float, dict, datetime, None, ...)

    Returns:
        One of TextDate, EpochDate, PartsDate, NativeDate, OpaqueDate
    """
    if isinstance(value, DATE_VARIANTS):
        return value
    if value is None:
        return OpaqueDate()
    if isinstance(value, str):
        return TextDate(text=value)
    if isinstance(value, bool):
        return OpaqueDate(value=value)
    if isinstance(value, (int, float)):
        return EpochDate(value=value)
    if isinstance(value, datetime):
        return NativeDate(value=value)
    if isinstance(value, date):
        return NativeDate(value=datetime.combine(value, time.min))
    if isinstance(value, Mapping):
        return parts_from_mapping(value)
    return OpaqueDate(value=value)
