from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..temporal.models import OpaqueDate, OrderDate, classify_date


class OrderStatus(str, Enum):
    NEW = "NEW"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


DEFAULT_STATUS = OrderStatus.NEW.value

# JSON key -> attribute name
WIRE_FIELDS: Dict[str, str] = {
    "id": "id",
    "customerName": "customer_name",
    "product": "product",
    "quantity": "quantity",
    "unitPrice": "unit_price",
    "orderDate": "order_date",
    "status": "status",
}


class OrderRecord(BaseModel):
    """An order as delivered by the orders API.

    Scalar fields are kept loose (the API is not trusted to send the right
    JSON types); only ``order_date`` is classified into its date variant.
    ``get()`` reads fields by their JSON key so a record can stand in for the
    raw dict anywhere the query engine expects one.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    id: Any = None
    customer_name: Any = Field(default=None, alias="customerName")
    product: Any = None
    quantity: Any = None
    unit_price: Any = Field(default=None, alias="unitPrice")
    order_date: OrderDate = Field(default_factory=OpaqueDate, alias="orderDate")
    status: Any = None

    @field_validator("order_date", mode="before")
    @classmethod
    def _classify_order_date(cls, value: Any) -> Any:
        return classify_date(value)

    def get(self, key: str, default: Any = None) -> Any:
        name = WIRE_FIELDS.get(key)
        if name is not None:
            value = getattr(self, name)
        else:
            value = (self.model_extra or {}).get(key)
        return default if value is None else value

    @property
    def is_new(self) -> bool:
        """No id yet: saving this record creates it."""
        return self.id is None or str(self.id).strip() == ""


class OrderPayload(BaseModel):
    """Body sent to the orders API on create/update."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: Optional[Union[int, float]] = None
    customer_name: str = Field(alias="customerName")
    product: str
    quantity: Union[int, float]
    unit_price: Union[int, float] = Field(alias="unitPrice")
    order_date: str = Field(alias="orderDate")
    status: str

    def to_wire(self) -> Dict[str, Any]:
        """JSON body with camelCase keys; 'id' only present for updates."""
        return self.model_dump(by_alias=True, exclude_none=True)
