"""Money formatting and derived per-row values."""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Mapping

from ..config.loader import DisplaySettings
from ..utils.coerce import to_number

DEFAULT_SETTINGS = DisplaySettings()

CENT = Decimal("0.01")


def format_money(value: Any, settings: DisplaySettings | None = None) -> str:
    """
    Format a price with two fixed decimals and locale separators.

    Missing or non-numeric values show as 0.00.

    Example:
        >>> format_money("1234.5")
        '1,234.50'
    """
    settings = settings or DEFAULT_SETTINGS
    number = to_number(value or 0)
    if math.isnan(number):
        number = 0.0
    if math.isinf(number):
        return "-∞" if number < 0 else "∞"

    exact = Decimal(repr(number))
    with localcontext() as ctx:
        # Enough digits for every integer place plus the cents.
        ctx.prec = max(ctx.prec, exact.adjusted() + 4)
        amount = exact.quantize(CENT, rounding=ROUND_HALF_UP)
        whole, _, cents = f"{abs(amount):.2f}".partition(".")
    sign = "-" if amount < 0 else ""
    groups = []
    while len(whole) > 3:
        groups.insert(0, whole[-3:])
        whole = whole[:-3]
    groups.insert(0, whole)
    return f"{sign}{settings.thousands_separator.join(groups)}{settings.decimal_separator}{cents}"


def line_total(record: Mapping[str, Any]) -> float:
    """quantity x unitPrice, with anything non-numeric counted as 0."""
    quantity = to_number(record.get("quantity"))
    unit_price = to_number(record.get("unitPrice"))
    if math.isnan(quantity):
        quantity = 0.0
    if math.isnan(unit_price):
        unit_price = 0.0
    return quantity * unit_price
