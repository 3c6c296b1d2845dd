"""Export API: the current order table page as JSON or CSV."""

import csv
import json
from io import StringIO
from pathlib import Path
from typing import Any, Sequence

from ..config.loader import DisplaySettings
from ..query.models import QueryDescriptor
from ..utils.time import utc_now_z
from .orders_api import get_orders_page

CSV_COLUMNS = [
    "id",
    "customer_name",
    "product",
    "quantity",
    "unit_price",
    "order_date",
    "status",
    "line_total",
]


def export_orders(
    records: Sequence[Any],
    descriptor: QueryDescriptor | None = None,
    settings: DisplaySettings | None = None,
    format: str = "json",
    out: Path | None = None,
) -> str:
    """
    Export one page of the order table.

    Args:
        records: Order dicts or OrderRecord models
        descriptor: Search/sort/page to apply
        settings: Display settings (locale, page sizes)
        format: Export format ("json" or "csv")
        out: Output file path (if None, returns as string)

    Returns:
        Exported data as string (if out is None) or a confirmation message
    """
    if format not in ("json", "csv"):
        raise ValueError(f"Unsupported format: {format}")

    page = get_orders_page(records, descriptor, settings)

    if format == "json":
        export_data = {
            "export_schema_version": "1",
            "exported_at_utc": utc_now_z(),
            "data": page.model_dump(exclude={"rows": {"__all__": {"record"}}}),
        }
        output = json.dumps(export_data, indent=2, sort_keys=True, ensure_ascii=False)
        if out:
            out.write_text(output, encoding="utf-8")
            return f"Exported to {out}"
        return output

    # CSV: stable column order, display strings only
    output_buffer = StringIO()
    writer = csv.writer(output_buffer)
    writer.writerow(CSV_COLUMNS)
    for row in page.rows:
        cells = row.model_dump(include=set(CSV_COLUMNS))
        writer.writerow([cells.get(col, "") for col in CSV_COLUMNS])

    output = output_buffer.getvalue()
    if out:
        out.write_text(output, encoding="utf-8", newline="")
        return f"Exported to {out}"
    return output
