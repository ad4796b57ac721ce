"""
Time Normalizer
===============

Parse ISO-8601 timestamps into UTC datetimes.

Order of attempts:
    1. datetime.fromisoformat - naive values are taken as UTC,
       offset values ('Z', '+02:00', '-05:30') are converted to UTC
    2. Fixed UTC patterns with 0, 3, 6 or 9 fractional digits

Sub-microsecond digits are truncated; datetime carries microseconds.
"""

import re
from datetime import datetime, timezone
from typing import Optional


# yyyy-MM-ddTHH:mm:ss[.fff|.ffffff|.fffffffff]Z, tried in this order
_FIXED_PATTERNS = [
    re.compile(r'(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})Z', re.ASCII),
    re.compile(r'(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})\.(\d{3})Z', re.ASCII),
    re.compile(r'(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})\.(\d{6})Z', re.ASCII),
    re.compile(r'(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})\.(\d{9})Z', re.ASCII),
]


def to_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes; convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _parse_fixed(text: str) -> Optional[datetime]:
    for pattern in _FIXED_PATTERNS:
        match = pattern.fullmatch(text)
        if match is None:
            continue

        year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
        fraction = match.group(7) if pattern.groups > 6 else None
        microsecond = int(fraction[:6].ljust(6, '0')) if fraction else 0

        try:
            return datetime(year, month, day, hour, minute, second, microsecond,
                            tzinfo=timezone.utc)
        except ValueError:
            # Out-of-range component; later patterns cannot match either
            return None

    return None


def parse_time(text: Optional[str]) -> Optional[datetime]:
    """
    Parse a timestamp into an aware UTC datetime.

    Args:
        text: Raw timestamp field

    Returns:
        UTC datetime, or None if no attempt succeeds
    """
    if text is None:
        return None

    s = text.strip()
    if not s:
        return None

    try:
        return to_utc(datetime.fromisoformat(s))
    except (ValueError, OverflowError):
        # OverflowError: in range locally, out of range once shifted to UTC
        pass

    return _parse_fixed(s)
