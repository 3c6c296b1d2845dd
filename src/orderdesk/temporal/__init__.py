"""Order date normalization and display formatting."""

from .display import to_display_text
from .models import (
    EpochDate,
    NativeDate,
    OpaqueDate,
    OrderDate,
    PartsDate,
    TextDate,
    classify_date,
)
from .normalizer import parse_editable_text, to_editable_text, to_instant, to_wire_text

__all__ = [
    "EpochDate",
    "NativeDate",
    "OpaqueDate",
    "OrderDate",
    "PartsDate",
    "TextDate",
    "classify_date",
    "parse_editable_text",
    "to_display_text",
    "to_editable_text",
    "to_instant",
    "to_wire_text",
]
