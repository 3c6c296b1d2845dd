"""Tests for time utilities."""

from datetime import datetime, timezone, timedelta

from orderdesk.utils.time import local_now, to_utc_seconds_text, to_utc_z, utc_now_z


def test_utc_now_z_always_ends_with_z():
    """Test that utc_now_z() always ends with Z."""
    result = utc_now_z()
    assert result.endswith('Z'), f"Expected result to end with 'Z', got: {result}"


def test_utc_now_z_never_contains_plus_00_00_z():
    """Test that utc_now_z() never returns invalid +00:00Z format."""
    result = utc_now_z()
    assert '+00:00Z' not in result, f"Result should not contain '+00:00Z', got: {result}"


def test_to_utc_z_converts_non_utc_timezone():
    """Test that to_utc_z() converts non-UTC timezone to UTC."""
    est = timezone(timedelta(hours=-5))
    dt_est = datetime(2025, 12, 23, 12, 0, 0, tzinfo=est)

    assert to_utc_z(dt_est) == '2025-12-23T17:00:00Z'


def test_to_utc_z_preserves_microseconds():
    """Test that to_utc_z() preserves microseconds."""
    dt = datetime(2025, 12, 23, 12, 34, 56, 123456, tzinfo=timezone.utc)
    assert to_utc_z(dt) == '2025-12-23T12:34:56.123456Z'


def test_to_utc_z_treats_naive_as_local():
    """Test that naive datetimes are read as local time."""
    naive_dt = datetime(2025, 12, 23, 12, 0, 0)
    expected = naive_dt.astimezone().astimezone(timezone.utc)
    assert to_utc_z(naive_dt) == expected.isoformat().replace('+00:00', 'Z')


def test_to_utc_seconds_text():
    """Test the table's date/time rendering."""
    dt = datetime(2024, 3, 5, 9, 7, 42, 999999, tzinfo=timezone(timedelta(hours=2)))
    assert to_utc_seconds_text(dt) == '2024-03-05 07:07:42'


def test_local_now_is_naive():
    """Test that local_now() returns the canonical naive form."""
    assert local_now().tzinfo is None
