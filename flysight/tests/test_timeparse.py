"""
Test Time Normalizer
====================
"""

from datetime import datetime, timezone

import pytest

from flysight.stream.timeparse import parse_time


def test_zulu_whole_seconds():
    """'Z' suffix parses as UTC."""
    assert parse_time('2025-01-01T12:34:56Z') == datetime(2025, 1, 1, 12, 34, 56, tzinfo=timezone.utc)


def test_milliseconds():
    """Millisecond fraction is kept, offset is zero."""
    t = parse_time('2025-01-01T12:34:56.123Z')
    assert t.microsecond == 123000
    assert t.utcoffset().total_seconds() == 0


def test_positive_offset_normalized():
    """+02:00 is converted to UTC."""
    t = parse_time('2025-01-01T12:34:56+02:00')
    assert t == datetime(2025, 1, 1, 10, 34, 56, tzinfo=timezone.utc)
    assert t.tzinfo is timezone.utc


def test_negative_offset_normalized():
    """-05:30 is converted to UTC."""
    t = parse_time('2025-01-01T23:00:00-05:30')
    assert t == datetime(2025, 1, 2, 4, 30, tzinfo=timezone.utc)


def test_naive_assumed_utc():
    """No zone designator means UTC."""
    t = parse_time('2025-01-01T12:34:56')
    assert t == datetime(2025, 1, 1, 12, 34, 56, tzinfo=timezone.utc)


@pytest.mark.parametrize('text, micro', [
    ('2025-01-01T12:34:56.123456Z', 123456),
    ('2025-01-01T12:34:56.123456789Z', 123456),
])
def test_fractional_precision(text, micro):
    """6 and 9 fractional digits; nanoseconds truncated."""
    t = parse_time(text)
    assert t.second == 56
    assert t.microsecond == micro
    assert t.tzinfo is timezone.utc


@pytest.mark.parametrize('text', [
    '', 'not a time', '2025-13-01T00:00:00Z', '12:34:56', None,
    '0001-01-01T00:00:00+01:00', '9999-12-31T23:59:59-01:00',
    '\u0662\u0660\u0662\u0665-01-01T00:00:00Z',
])
def test_invalid(text):
    """Unparseable timestamps return None."""
    assert parse_time(text) is None


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
