"""
Unit tests for device_management.utils.datetime_utils
"""
from datetime import datetime, timedelta, timezone

from device_management.utils.datetime_utils import ensure_utc, utc_now


class TestEnsureUtc:
    """Tests for ensure_utc"""

    def test_none_returns_none(self):
        assert ensure_utc(None) is None

    def test_naive_assumed_utc(self):
        dt = datetime(2025, 1, 15, 12, 0, 0)
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.hour == 12

    def test_aware_converted_to_utc(self):
        # UTC+5:30
        dt = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.hour == 6
        assert result.minute == 30


class TestUtcNow:
    """Tests for utc_now"""

    def test_is_aware_utc(self):
        assert utc_now().tzinfo == timezone.utc

    def test_truncated_to_milliseconds(self):
        assert utc_now().microsecond % 1000 == 0
