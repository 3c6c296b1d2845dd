"""Orders API: canonical query surface for the order table."""

from typing import Any, Sequence

from ..config.loader import DisplaySettings
from ..query.engine import apply_query
from ..query.formatting import DEFAULT_SETTINGS, format_money, line_total
from ..query.models import QueryDescriptor, QueryResult
from ..temporal.display import to_display_text
from ..utils.coerce import to_text
from .models import OrderPageDTO, OrderRowDTO, PagerDTO, ResultsSummary


def order_to_row(record: Any, settings: DisplaySettings | None = None) -> OrderRowDTO:
    """Format one order record (dict or OrderRecord) into table cells."""
    settings = settings or DEFAULT_SETTINGS
    status = to_text(record.get("status"))
    return OrderRowDTO(
        id=to_text(record.get("id")),
        customer_name=to_text(record.get("customerName")),
        product=to_text(record.get("product")),
        quantity=to_text(record.get("quantity")),
        unit_price=format_money(record.get("unitPrice"), settings),
        order_date=to_display_text(record.get("orderDate")),
        status=status,
        status_class=status.lower(),
        line_total=format_money(line_total(record), settings),
        record=record,
    )


def build_pager(result: QueryResult) -> PagerDTO:
    """Pager state for a query result; every target stays within [1, total_pages]."""
    page = result.page_number
    total_pages = result.total_pages
    return PagerDTO(
        page=page,
        total_pages=total_pages,
        has_previous=page > 1,
        has_next=page < total_pages,
        first_page=1,
        previous_page=max(1, page - 1),
        next_page=min(total_pages, page + 1),
        last_page=total_pages,
    )


def get_orders_page(
    records: Sequence[Any],
    descriptor: QueryDescriptor | None = None,
    settings: DisplaySettings | None = None,
) -> OrderPageDTO:
    """
    Build everything the order table shows for one render.

    Args:
        records: Order dicts or OrderRecord models, as loaded from the API
        descriptor: Search/sort/page; defaults to id ascending, page 1,
            page size from settings
        settings: Display settings (locale, page sizes)

    Returns:
        OrderPageDTO with formatted rows, "showing X of Y" summary and pager
    """
    settings = settings or DEFAULT_SETTINGS
    descriptor = descriptor or QueryDescriptor(page_size=settings.page_size)
    result = apply_query(records, descriptor, settings)
    rows = [order_to_row(record, settings) for record in result.visible_records]
    return OrderPageDTO(
        rows=rows,
        summary=ResultsSummary(shown=len(rows), total=result.total_matching),
        pager=build_pager(result),
        sort_key=descriptor.sort_key,
        sort_direction=descriptor.sort_direction,
        search_term=descriptor.search_term,
        page_size=descriptor.page_size,
        page_size_options=list(settings.page_size_options),
    )
