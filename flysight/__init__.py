"""
FlySight - Streaming Log Parser
===============================

Parse FlySight GPS logs into immutable samples, one line at a time.

    LINES IN → CLASSIFY → TOKENIZE → MAP → VALIDATE → SAMPLES OUT
                                                (nothing buffered)

Architecture:
    - core/: Sample value type, canonical columns
    - stream/: Line classifier, tokenizer, schema resolver, engine, readers
    - query/: Lazy filters, summary, DataFrame export
    - config/: Reader settings (YAML)

Usage:
    from flysight import read_file, SampleQuery

    track = SampleQuery(read_file('TRACK.CSV')).where_fix_3d()
    print(track.summary())
"""

__version__ = "1.0.0"

from .core import Sample, CANONICAL_COLUMNS
from .config import ReaderConfig, ConfigurationError, load_config
from .stream import (
    ParseCancelled,
    read,
    read_async,
    read_file,
    read_file_async,
)
from .query import (
    between,
    where_fix_at_least,
    where_fix_3d,
    with_accuracy,
    within_bounds,
    TrackSummary,
    summary,
    SampleQuery,
    to_frame,
    to_array,
)

__all__ = [
    'Sample',
    'CANONICAL_COLUMNS',
    'ReaderConfig',
    'ConfigurationError',
    'load_config',
    'ParseCancelled',
    'read',
    'read_async',
    'read_file',
    'read_file_async',
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
    '__version__',
]
