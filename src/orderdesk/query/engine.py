"""List query engine: filter -> sort -> paginate over order records.

Records are the dicts delivered by the orders API (camelCase keys) or
``OrderRecord`` models; both are read through ``record.get(key)``. Every
function here is pure: the input sequence is never mutated and the same
(records, descriptor) always yields an equal QueryResult.
"""

import math
from typing import Any, List, Sequence, Tuple

from ..config.loader import DisplaySettings
from ..temporal.display import to_display_text
from ..utils.coerce import to_number, to_text
from .collation import collation_key
from .formatting import DEFAULT_SETTINGS, format_money
from .models import NUMERIC_SORT_KEYS, QueryDescriptor, QueryResult


def searchable_text(record: Any, settings: DisplaySettings | None = None) -> str:
    """
    Text a search term is matched against, lower-cased.

    Concatenates id, customer name, product, status, the displayed order
    date and the formatted unit price, space-separated.
    """
    fields = [
        to_text(record.get("id")),
        to_text(record.get("customerName")),
        to_text(record.get("product")),
        to_text(record.get("status")),
        to_display_text(record.get("orderDate")),
        format_money(record.get("unitPrice"), settings),
    ]
    return " ".join(fields).lower()


def filter_records(
    records: Sequence[Any],
    search_term: str,
    settings: DisplaySettings | None = None,
) -> List[Any]:
    """Keep records whose searchable text contains the trimmed term (substring, case-insensitive)."""
    term = (search_term or "").strip().lower()
    if not term:
        return list(records)
    return [record for record in records if term in searchable_text(record, settings)]


def _numeric_sort_key(value: Any) -> Tuple[int, float]:
    # Missing and non-numeric values rank below every number.
    if value is None:
        return (0, 0.0)
    number = to_number(value)
    if math.isnan(number):
        return (0, 0.0)
    return (1, number)


def _text_sort_key(record: Any, sort_key: str, locale: str) -> Tuple[str, str, str]:
    value = record.get(sort_key)
    text = to_display_text(value) if sort_key == "orderDate" else to_text(value)
    return collation_key(text.lower(), locale)


def sort_records(
    records: Sequence[Any],
    sort_key: str = "id",
    sort_direction: str = "asc",
    settings: DisplaySettings | None = None,
) -> List[Any]:
    """
    Stable sort by one column.

    id, quantity and unitPrice compare as numbers; every other column
    compares as case-insensitive text collated for the configured locale
    (orderDate by its displayed form). Descending order keeps ties in their
    input order.
    """
    descending = sort_direction == "desc"
    if sort_key in NUMERIC_SORT_KEYS:
        return sorted(records, key=lambda r: _numeric_sort_key(r.get(sort_key)), reverse=descending)
    locale = (settings or DEFAULT_SETTINGS).locale
    return sorted(records, key=lambda r: _text_sort_key(r, sort_key, locale), reverse=descending)


def paginate(records: Sequence[Any], page_number: int, page_size: int) -> QueryResult:
    """
    Slice one page out of an already filtered and sorted sequence.

    The page number is clamped into [1, total_pages]; an empty sequence
    still has one (empty) page.
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    total = len(records)
    total_pages = max(1, math.ceil(total / page_size))
    page = max(1, min(total_pages, page_number))
    start = (page - 1) * page_size
    return QueryResult(
        visible_records=list(records[start:start + page_size]),
        total_matching=total,
        total_pages=total_pages,
        page_number=page,
    )


def apply_query(
    records: Sequence[Any],
    descriptor: QueryDescriptor | None = None,
    settings: DisplaySettings | None = None,
) -> QueryResult:
    """
    Apply a query descriptor to an order collection.

    Args:
        records: Order dicts or OrderRecord models
        descriptor: Search/sort/page to apply; defaults to id ascending, page 1
        settings: Locale settings for money text in search; defaults to en-US

    Returns:
        QueryResult with the visible page and paging metadata
    """
    descriptor = descriptor or QueryDescriptor()
    settings = settings or DEFAULT_SETTINGS
    matching = filter_records(records, descriptor.search_term, settings)
    ordered = sort_records(matching, descriptor.sort_key, descriptor.sort_direction, settings)
    return paginate(ordered, descriptor.page_number, descriptor.page_size)
