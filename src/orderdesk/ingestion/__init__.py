from .file_ingestor import (
    load_draft_from_json,
    load_order_records,
    load_orders_from_json,
)

__all__ = [
    "load_draft_from_json",
    "load_order_records",
    "load_orders_from_json",
]
