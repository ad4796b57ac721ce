"""
Track Summary
=============

Single-pass time span and count over a sample sequence.
"""

from datetime import datetime
from typing import Iterable, NamedTuple, Optional

from flysight.core.sample import Sample


class TrackSummary(NamedTuple):
    start: datetime
    end: datetime
    count: int

    @property
    def duration_seconds(self) -> float:
        return (self.end - self.start).total_seconds()


def summary(samples: Iterable[Sample]) -> Optional[TrackSummary]:
    """
    Earliest time, latest time and count.

    Consumes the whole sequence. Input need not be sorted.

    Returns:
        TrackSummary, or None if there were no samples
    """
    start = end = None
    count = 0

    for s in samples:
        if start is None:
            start = end = s.time
        elif s.time < start:
            start = s.time
        elif s.time > end:
            end = s.time
        count += 1

    if start is None:
        return None
    return TrackSummary(start=start, end=end, count=count)
