"""Order form: populate from a record, validate, and build the API payload."""

import math
from typing import Any, Optional

from pydantic import BaseModel, Field

from ..temporal.normalizer import parse_editable_text, to_editable_text, to_instant, to_wire_text
from ..utils import time as time_utils
from ..utils.coerce import to_integral, to_number, to_text
from ..utils.logging import get_logger
from .models import DEFAULT_STATUS, OrderPayload

logger = get_logger(__name__)

DEFAULT_QUANTITY = 1
DEFAULT_UNIT_PRICE = 0


class OrderValidationError(ValueError):
    """A draft failed form validation. The message is shown to the user as-is."""


def _now_input() -> str:
    return to_editable_text(time_utils.local_now())


class OrderDraft(BaseModel):
    """Values currently held by the order form's inputs.

    Inputs hold text or numbers depending on where the value came from, so
    the numeric fields are untyped until validation.
    """
    id: Any = ""
    customer_name: Any = ""
    product: Any = ""
    quantity: Any = DEFAULT_QUANTITY
    unit_price: Any = DEFAULT_UNIT_PRICE
    order_date_input: str = Field(default_factory=_now_input)
    status: str = DEFAULT_STATUS

    @property
    def is_update(self) -> bool:
        return bool(to_text(self.id).strip())


def empty_draft() -> OrderDraft:
    """Blank "New Order" form dated now."""
    return OrderDraft()


def draft_from_record(record: Any) -> OrderDraft:
    """
    Populate the form for editing an existing order.

    Missing fields fall back to the blank-form defaults. The order date is
    normalized from whatever shape the API sent into the input's format.

    Args:
        record: Order dict (camelCase keys) or OrderRecord
    """
    def field(key: str, default: Any) -> Any:
        value = record.get(key)
        return default if value is None else value

    return OrderDraft(
        id=field("id", ""),
        customer_name=field("customerName", ""),
        product=field("product", ""),
        quantity=field("quantity", DEFAULT_QUANTITY),
        unit_price=field("unitPrice", DEFAULT_UNIT_PRICE),
        order_date_input=to_editable_text(to_instant(record.get("orderDate"))),
        status=to_text(field("status", DEFAULT_STATUS)),
    )


def validate_draft(draft: OrderDraft) -> Optional[str]:
    """
    Check the draft against the form rules.

    Rules are checked in a fixed order and only the first failure is
    reported: customer name, product, quantity, unit price, order date.

    Returns:
        User-facing message for the first failing rule, or None if valid
    """
    if not to_text(draft.customer_name).strip():
        return "Customer name is required"
    if not to_text(draft.product).strip():
        return "Product is required"
    quantity = to_number(draft.quantity)
    if not math.isfinite(quantity) or quantity <= 0:
        return "Quantity must be a positive number"
    unit_price = to_number(draft.unit_price)
    if not math.isfinite(unit_price) or unit_price < 0:
        return "Unit price must be a non-negative number"
    if parse_editable_text(draft.order_date_input) is None:
        return "Order date is invalid"
    return None


def _payload_id(draft: OrderDraft) -> Optional[int | float]:
    if not draft.is_update:
        return None
    number = to_number(draft.id)
    if math.isnan(number) or number == 0:
        logger.warning(f"Ignoring non-numeric order id {draft.id!r}; payload will create a new order")
        return None
    return to_integral(number)


def build_payload(draft: OrderDraft) -> OrderPayload:
    """
    Turn a valid draft into the body sent to the orders API.

    The date input is read back into an instant and re-rendered with
    seconds; names and status are trimmed; numbers are coerced. 'id' is
    only set when the draft has one.

    Raises:
        OrderValidationError: If validate_draft() reports a problem
    """
    message = validate_draft(draft)
    if message:
        raise OrderValidationError(message)

    instant = parse_editable_text(draft.order_date_input)
    return OrderPayload(
        id=_payload_id(draft),
        customer_name=to_text(draft.customer_name).strip(),
        product=to_text(draft.product).strip(),
        quantity=to_integral(to_number(draft.quantity)),
        unit_price=to_integral(to_number(draft.unit_price)),
        order_date=to_wire_text(instant),
        status=to_text(draft.status).strip(),
    )
