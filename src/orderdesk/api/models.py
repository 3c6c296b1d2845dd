"""Composition DTOs for the order table.

Rows carry display strings only; the raw record stays available on the
row for callers that need to act on it (edit, delete).
"""

from typing import Any, List, Optional

from pydantic import BaseModel


class OrderRowDTO(BaseModel):
    """One table row, every cell already formatted."""
    id: str
    customer_name: str
    product: str
    quantity: str
    unit_price: str
    order_date: str
    status: str
    status_class: str  # lower-cased status, for styling hooks
    line_total: str
    record: Any = None


class PagerDTO(BaseModel):
    """Pager controls. Targets are clamped, so first/prev on page 1 point at 1."""
    page: int
    total_pages: int
    has_previous: bool
    has_next: bool
    first_page: int = 1
    previous_page: int
    next_page: int
    last_page: int


class ResultsSummary(BaseModel):
    shown: int
    total: int


class OrderPageDTO(BaseModel):
    """Composition DTO: visible rows + summary + pager for one table render."""
    rows: List[OrderRowDTO]
    summary: ResultsSummary
    pager: PagerDTO
    sort_key: str
    sort_direction: str
    search_term: str = ""
    page_size: int
    page_size_options: Optional[List[int]] = None
