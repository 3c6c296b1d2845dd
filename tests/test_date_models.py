"""Tests for order date classification and the OrderRecord boundary model."""

from datetime import date, datetime

from orderdesk.orders.models import OrderRecord
from orderdesk.temporal.models import (
    EpochDate,
    NativeDate,
    OpaqueDate,
    PartsDate,
    TextDate,
    classify_date,
)


def test_classify_each_shape():
    """Test that every accepted shape maps to its variant."""
    assert isinstance(classify_date("2024-01-01T10:00:00Z"), TextDate)
    assert isinstance(classify_date(1700000000), EpochDate)
    assert isinstance(classify_date(1700000000.5), EpochDate)
    assert isinstance(classify_date({"year": 2024, "month": 1, "day": 2}), PartsDate)
    assert isinstance(classify_date(datetime(2024, 1, 2)), NativeDate)
    assert isinstance(classify_date(None), OpaqueDate)


def test_booleans_are_not_epoch_numbers():
    """Test that True/False are not read as timestamps 1/0."""
    assert isinstance(classify_date(True), OpaqueDate)
    assert isinstance(classify_date(False), OpaqueDate)


def test_bare_date_becomes_native_midnight():
    """Test promotion of date to datetime."""
    classified = classify_date(date(2024, 5, 6))
    assert isinstance(classified, NativeDate)
    assert classified.value == datetime(2024, 5, 6, 0, 0)


def test_variants_pass_through():
    """Test that classification is idempotent."""
    text = TextDate(text="2024-01-01")
    assert classify_date(text) is text


def test_parts_resolve_first_present_alias():
    """Test alias resolution order and None skipping."""
    parts = classify_date({"year": None, "Y": 2023, "y": 1999, "m": 4, "day": 9, "min": 30})
    assert parts.year == 2023
    assert parts.month == 4
    assert parts.day == 9
    assert parts.minute == 30
    assert parts.hour is None
    assert parts.has_calendar_date is True


def test_parts_with_zero_component_have_no_calendar_date():
    """Test that a falsy year/month/day means the parts do not resolve."""
    parts = classify_date({"year": 2024, "month": 0, "day": 5})
    assert parts.has_calendar_date is False
    assert parts.raw == {"year": 2024, "month": 0, "day": 5}


def test_epoch_milliseconds_heuristic():
    """Test the seconds/milliseconds boundary."""
    assert EpochDate(value=1700000000).milliseconds == 1700000000000
    assert EpochDate(value=1700000000000).milliseconds == 1700000000000


def test_order_record_classifies_order_date():
    """Test that deserialized records carry a date variant."""
    record = OrderRecord.model_validate(
        {
            "id": 1,
            "customerName": "Acme",
            "product": "Anvil",
            "quantity": 2,
            "unitPrice": "9.99",
            "orderDate": {"Y": 2024, "m": 3, "d": 5},
            "status": "NEW",
        }
    )
    assert record.order_date.kind == "parts"
    assert record.customer_name == "Acme"
    assert record.unit_price == "9.99"


def test_order_record_missing_date_is_opaque():
    """Test the default date variant."""
    record = OrderRecord.model_validate({"id": 1})
    assert isinstance(record.order_date, OpaqueDate)


def test_order_record_get_reads_json_keys():
    """Test dict-style access by camelCase key, including extras."""
    record = OrderRecord.model_validate(
        {"id": 4, "customerName": "Globex", "unitPrice": 5, "notes": "rush"}
    )
    assert record.get("customerName") == "Globex"
    assert record.get("unitPrice") == 5
    assert record.get("notes") == "rush"
    assert record.get("product") is None
    assert record.get("product", "n/a") == "n/a"


def test_order_record_is_new_without_id():
    """Test create-vs-update detection."""
    assert OrderRecord.model_validate({}).is_new is True
    assert OrderRecord.model_validate({"id": ""}).is_new is True
    assert OrderRecord.model_validate({"id": 3}).is_new is False


def test_parts_keep_non_text_keys():
    """Test that mappings with numeric keys still classify as parts."""
    parts = classify_date({"year": 2024, 5: 1})
    assert isinstance(parts, PartsDate)
    assert parts.raw == {"year": 2024, 5: 1}
    assert parts.has_calendar_date is False
