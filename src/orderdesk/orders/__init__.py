"""Order records, the order form and the API payload."""

from .form import (
    OrderDraft,
    OrderValidationError,
    build_payload,
    draft_from_record,
    empty_draft,
    validate_draft,
)
from .models import OrderPayload, OrderRecord, OrderStatus

__all__ = [
    "OrderDraft",
    "OrderPayload",
    "OrderRecord",
    "OrderStatus",
    "OrderValidationError",
    "build_payload",
    "draft_from_record",
    "empty_draft",
    "validate_draft",
]
