"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest

FIXED_NOW = datetime(2024, 6, 1, 12, 30, 45)

STATUSES = ["NEW", "PROCESSING", "SHIPPED", "COMPLETED", "CANCELLED"]


@pytest.fixture
def fixed_now(monkeypatch):
    """Pin the normalizer's notion of "now" so fallbacks are assertable."""
    monkeypatch.setattr("orderdesk.utils.time.local_now", lambda: FIXED_NOW)
    return FIXED_NOW


@pytest.fixture
def twelve_orders():
    """Twelve orders with ids 1..12 in shuffled input order."""
    ids = [7, 2, 11, 4, 9, 1, 12, 5, 3, 10, 6, 8]
    return [
        {
            "id": order_id,
            "customerName": f"Customer {order_id:02d}",
            "product": "Widget",
            "quantity": order_id,
            "unitPrice": order_id * 1.5,
            "orderDate": f"2024-01-{order_id:02d}T10:00:00Z",
            "status": STATUSES[order_id % len(STATUSES)],
        }
        for order_id in ids
    ]


@pytest.fixture
def scenario_orders():
    """Two orders whose dates arrive in different shapes."""
    return [
        {"id": 3, "customerName": "Bob", "unitPrice": 2, "quantity": 3, "orderDate": 1700000000},
        {"id": 1, "customerName": "Ann", "unitPrice": 5, "quantity": 1, "orderDate": "2024-01-01T10:00:00Z"},
    ]
