"""Order table rendering (markdown and JSON).

This module is renderer-only. All query/transform logic lives in api/orders_api.py.
"""

import json

from ..api.models import OrderPageDTO

HEADERS = [
    ("id", "ID"),
    ("customerName", "Customer"),
    ("product", "Product"),
    ("quantity", "Qty"),
    ("unitPrice", "Unit Price"),
    ("orderDate", "Order Date"),
    ("status", "Status"),
    (None, "Total"),
]

EMPTY_MESSAGE = "No orders match your search."


def _escape(cell: str) -> str:
    return cell.replace("|", "\\|")


def _header_label(key: str | None, label: str, page: OrderPageDTO) -> str:
    if key is not None and key == page.sort_key:
        arrow = "▲" if page.sort_direction == "asc" else "▼"
        return f"{label} {arrow}"
    return label


def render_markdown(page: OrderPageDTO) -> str:
    """Render an order page as a markdown table with summary and pager lines."""
    lines = []

    lines.append("## Orders")
    lines.append("")
    if page.search_term.strip():
        lines.append(f"Search: `{page.search_term.strip()}`")
        lines.append("")

    headers = [_header_label(key, label, page) for key, label in HEADERS]
    lines.append("| " + " | ".join(headers) + " |")
    lines.append("|" + "|".join("---" for _ in headers) + "|")

    if not page.rows:
        cells = [EMPTY_MESSAGE] + [""] * (len(headers) - 1)
        lines.append("| " + " | ".join(cells) + " |")
    for row in page.rows:
        cells = [
            row.id,
            row.customer_name,
            row.product,
            row.quantity,
            row.unit_price,
            row.order_date,
            row.status,
            row.line_total,
        ]
        lines.append("| " + " | ".join(_escape(cell) for cell in cells) + " |")

    lines.append("")
    lines.append(f"Showing **{page.summary.shown}** of **{page.summary.total}** orders")
    lines.append("")

    pager = page.pager
    first = "«" if pager.has_previous else "-"
    prev = "‹" if pager.has_previous else "-"
    nxt = "›" if pager.has_next else "-"
    last = "»" if pager.has_next else "-"
    lines.append(f"{first} {prev} {pager.page} / {pager.total_pages} {nxt} {last}")
    lines.append("")

    return "\n".join(lines)


def render_json(page: OrderPageDTO) -> str:
    """Render an order page as JSON (rows without the raw record)."""
    data = page.model_dump(exclude={"rows": {"__all__": {"record"}}})
    return json.dumps(data, indent=2, ensure_ascii=False)
