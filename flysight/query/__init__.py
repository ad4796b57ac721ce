"""
FlySight Query Layer
====================

Operators over any sample sequence, however it was produced:
- filters: between, where_fix_at_least, where_fix_3d, with_accuracy, within_bounds
- summary: time span and count
- chain: SampleQuery fluent wrapper
- frame: polars / numpy export
"""

from .filters import (
    between,
    where_fix_at_least,
    where_fix_3d,
    with_accuracy,
    within_bounds,
)
from .summary import TrackSummary, summary
from .chain import SampleQuery
from .frame import to_frame, to_array

__all__ = [
    'between',
    'where_fix_at_least',
    'where_fix_3d',
    'with_accuracy',
    'within_bounds',
    'TrackSummary',
    'summary',
    'SampleQuery',
    'to_frame',
    'to_array',
]
