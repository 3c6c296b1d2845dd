"""Filter, sort and paginate order collections for the order table."""

from .engine import apply_query, filter_records, paginate, searchable_text, sort_records
from .formatting import format_money, line_total
from .models import QueryDescriptor, QueryResult, SortDirection, SortKey

__all__ = [
    "QueryDescriptor",
    "QueryResult",
    "SortDirection",
    "SortKey",
    "apply_query",
    "filter_records",
    "format_money",
    "line_total",
    "paginate",
    "searchable_text",
    "sort_records",
]
