"""Query descriptor and result for the order table.

A descriptor is immutable. Each user interaction (typing in the search box,
clicking a column header, changing page or page size) produces a new one via
the transition methods below; the engine maps (records, descriptor) to a
QueryResult.
"""

from typing import Any, List, Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field

SortKey = Literal["id", "customerName", "product", "quantity", "unitPrice", "orderDate", "status"]
SortDirection = Literal["asc", "desc"]

SORT_KEYS: Tuple[str, ...] = ("id", "customerName", "product", "quantity", "unitPrice", "orderDate", "status")
NUMERIC_SORT_KEYS: Tuple[str, ...] = ("id", "quantity", "unitPrice")


class QueryDescriptor(BaseModel):
    """Search term, sort and page applied to the order collection.

    ``page_number`` is not range-checked here; the engine clamps it to the
    pages that exist for the filtered collection.
    """
    model_config = ConfigDict(frozen=True)

    search_term: str = ""
    sort_key: SortKey = "id"
    sort_direction: SortDirection = "asc"
    page_number: int = 1
    page_size: int = Field(default=5, gt=0)

    def with_search_term(self, search_term: str) -> "QueryDescriptor":
        """New search term; the page goes back to 1."""
        return self.model_copy(update={"search_term": search_term, "page_number": 1})

    def with_page_size(self, page_size: int) -> "QueryDescriptor":
        """New page size; the page goes back to 1."""
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        return self.model_copy(update={"page_size": page_size, "page_number": 1})

    def toggle_sort(self, sort_key: SortKey) -> "QueryDescriptor":
        """
        Column header click.

        The active column flips direction; any other column becomes active
        in ascending order.
        """
        if sort_key not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {sort_key}")
        if sort_key == self.sort_key:
            direction = "desc" if self.sort_direction == "asc" else "asc"
            return self.model_copy(update={"sort_direction": direction})
        return self.model_copy(update={"sort_key": sort_key, "sort_direction": "asc"})

    def go_to_page(self, page_number: int, total_pages: int) -> "QueryDescriptor":
        """Move to a page, clamped into [1, total_pages]."""
        clamped = max(1, min(max(1, total_pages), page_number))
        return self.model_copy(update={"page_number": clamped})


class QueryResult(BaseModel):
    """Visible slice of the filtered, sorted collection plus paging metadata."""
    model_config = ConfigDict(frozen=True)

    visible_records: List[Any]
    total_matching: int
    total_pages: int
    page_number: int
