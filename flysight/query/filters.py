"""
Sample Filters
==============

Lazy filters over any iterable of samples. Each returns a generator, so
they compose with the streaming readers without materializing the track.

    samples = read_file('TRACK.CSV')
    good = with_accuracy(where_fix_3d(samples), max_horizontal=5.0)
"""

from datetime import datetime
from typing import Iterable, Iterator, Optional

from flysight.core.sample import Sample


def between(
    samples: Iterable[Sample],
    start_inclusive: Optional[datetime] = None,
    end_exclusive: Optional[datetime] = None,
) -> Iterator[Sample]:
    """
    Keep samples with start_inclusive <= time < end_exclusive.

    Either bound may be None (unbounded on that side). Bounds must be
    timezone-aware to compare with sample times.
    """
    for s in samples:
        if start_inclusive is not None and s.time < start_inclusive:
            continue
        if end_exclusive is not None and s.time >= end_exclusive:
            continue
        yield s


def where_fix_at_least(samples: Iterable[Sample], min_fix: int) -> Iterator[Sample]:
    """Keep samples whose gps_fix >= min_fix. A missing fix counts as 0."""
    return (s for s in samples if (s.gps_fix or 0) >= min_fix)


def where_fix_3d(samples: Iterable[Sample]) -> Iterator[Sample]:
    """Keep samples with a 3D fix (gps_fix >= 3)."""
    return where_fix_at_least(samples, 3)


def with_accuracy(
    samples: Iterable[Sample],
    max_horizontal: Optional[float] = None,
    max_vertical: Optional[float] = None,
) -> Iterator[Sample]:
    """
    Keep samples within the given accuracy bounds (meters, inclusive).

    A bound of None is ignored. When a bound is given, samples that do not
    report that accuracy are dropped.
    """
    for s in samples:
        if max_horizontal is not None and (
            s.horizontal_accuracy is None or s.horizontal_accuracy > max_horizontal
        ):
            continue
        if max_vertical is not None and (
            s.vertical_accuracy is None or s.vertical_accuracy > max_vertical
        ):
            continue
        yield s


def within_bounds(
    samples: Iterable[Sample],
    min_lat: float,
    max_lat: float,
    min_lon: float,
    max_lon: float,
) -> Iterator[Sample]:
    """Keep samples inside the latitude/longitude rectangle (edges included)."""
    for s in samples:
        if s.latitude < min_lat or s.latitude > max_lat:
            continue
        if s.longitude < min_lon or s.longitude > max_lon:
            continue
        yield s
