"""Unit tests for timestamp utilities."""

import time
from datetime import datetime, timedelta, timezone

from cl_upload_tools.utils.timestamp import microtime_digits, to_microseconds


def test_to_microseconds_aware():
    """2023-01-01 12:00:00.000123 UTC."""
    dt = datetime(2023, 1, 1, 12, 0, 0, 123, tzinfo=timezone.utc)
    assert to_microseconds(dt) == 1672574400_000123


def test_to_microseconds_with_offset():
    offset = timezone(timedelta(hours=5, minutes=30))
    dt = datetime(2023, 5, 20, 10, 0, 0, tzinfo=offset)
    utc = datetime(2023, 5, 20, 4, 30, 0, tzinfo=timezone.utc)

    assert to_microseconds(dt) == to_microseconds(utc)


def test_to_microseconds_naive_is_local():
    dt = datetime(2023, 1, 1, 12, 0, 0)
    assert to_microseconds(dt) == to_microseconds(dt.astimezone())


def test_microtime_digits_for_given_moment():
    dt = datetime(2023, 1, 1, 12, 0, 0, 5, tzinfo=timezone.utc)
    assert microtime_digits(dt) == "1672574400000005"


def test_microtime_digits_now():
    before = time.time_ns() // 1000
    digits = microtime_digits()
    after = time.time_ns() // 1000

    assert digits.isdigit()
    assert before <= int(digits) <= after
