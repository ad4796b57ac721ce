"""
Fluent Query
============

Chainable wrapper over the filter functions.

    track = (
        SampleQuery(read_file('TRACK.CSV'))
        .where_fix_3d()
        .with_accuracy(max_horizontal=5.0, max_vertical=5.0)
        .between(exit_time, None)
    )
    print(track.summary())

Each call wraps the previous generator; nothing runs until iteration or
a terminal call (summary, to_frame, to_list).
"""

from datetime import datetime
from typing import Iterable, Iterator, List, Optional

import polars as pl

from flysight.core.sample import Sample
from flysight.query import filters
from flysight.query.frame import to_frame
from flysight.query.summary import TrackSummary, summary


class SampleQuery:
    """Lazy, chainable view over a sample sequence."""

    def __init__(self, samples: Iterable[Sample]):
        self._samples = samples

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)

    def between(
        self,
        start_inclusive: Optional[datetime] = None,
        end_exclusive: Optional[datetime] = None,
    ) -> 'SampleQuery':
        return SampleQuery(filters.between(self._samples, start_inclusive, end_exclusive))

    def where_fix_at_least(self, min_fix: int) -> 'SampleQuery':
        return SampleQuery(filters.where_fix_at_least(self._samples, min_fix))

    def where_fix_3d(self) -> 'SampleQuery':
        return SampleQuery(filters.where_fix_3d(self._samples))

    def with_accuracy(
        self,
        max_horizontal: Optional[float] = None,
        max_vertical: Optional[float] = None,
    ) -> 'SampleQuery':
        return SampleQuery(filters.with_accuracy(self._samples, max_horizontal, max_vertical))

    def within_bounds(
        self,
        min_lat: float,
        max_lat: float,
        min_lon: float,
        max_lon: float,
    ) -> 'SampleQuery':
        return SampleQuery(
            filters.within_bounds(self._samples, min_lat, max_lat, min_lon, max_lon)
        )

    # Terminal operations

    def summary(self) -> Optional[TrackSummary]:
        return summary(self._samples)

    def to_frame(self) -> pl.DataFrame:
        return to_frame(self._samples)

    def to_list(self) -> List[Sample]:
        return list(self._samples)
