"""Loose value coercion for fields that arrive with unreliable JSON types."""

import math
from typing import Any


def to_number(value: Any) -> float:
    """
    Coerce a field value to a float.

    None, blank strings and False become 0. Text is parsed after stripping.
    Anything that cannot be read as a number becomes NaN.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def to_text(value: Any) -> str:
    """
    Stringify a field value for display and search.

    None becomes an empty string, booleans are lower-case and integral
    floats drop their trailing '.0' so that 5.0 and 5 read the same.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def to_integral(value: float) -> int | float:
    """Return an int when the number has no fractional part."""
    if math.isfinite(value) and value.is_integer():
        return int(value)
    return value
