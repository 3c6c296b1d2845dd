"""Tests for loading orders from JSON files."""

import json

import pytest

from orderdesk.ingestion.file_ingestor import (
    load_draft_from_json,
    load_order_records,
    load_orders_from_json,
)
from orderdesk.temporal.models import EpochDate, TextDate


def test_load_orders_skips_non_objects(tmp_path):
    """Test that only JSON objects become orders."""
    path = tmp_path / "orders.json"
    path.write_text(json.dumps([{"id": 1}, "junk", 3, {"id": 2}]), encoding="utf-8")
    assert load_orders_from_json(path) == [{"id": 1}, {"id": 2}]


def test_missing_orders_file_is_empty(tmp_path):
    """Test that a missing file yields no orders."""
    assert load_orders_from_json(tmp_path / "missing.json") == []


def test_invalid_orders_file(tmp_path):
    """Test malformed and non-array files."""
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="not valid JSON"):
        load_orders_from_json(bad)

    obj = tmp_path / "obj.json"
    obj.write_text('{"id": 1}', encoding="utf-8")
    with pytest.raises(ValueError, match="JSON array"):
        load_orders_from_json(obj)


def test_load_order_records_classifies_dates(tmp_path, scenario_orders):
    """Test that loaded records carry date variants."""
    path = tmp_path / "orders.json"
    path.write_text(json.dumps(scenario_orders), encoding="utf-8")
    records = load_order_records(path)
    assert isinstance(records[0].order_date, EpochDate)
    assert isinstance(records[1].order_date, TextDate)
    assert records[1].get("customerName") == "Ann"


def test_load_draft(tmp_path):
    """Test loading a single order object."""
    path = tmp_path / "order.json"
    path.write_text('{"customerName": "Acme"}', encoding="utf-8")
    assert load_draft_from_json(path) == {"customerName": "Acme"}

    with pytest.raises(FileNotFoundError):
        load_draft_from_json(tmp_path / "missing.json")

    listing = tmp_path / "list.json"
    listing.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError, match="JSON object"):
        load_draft_from_json(listing)
