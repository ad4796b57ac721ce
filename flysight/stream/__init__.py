"""
FlySight Streaming Parser
=========================

Line-at-a-time parsing of FlySight CSV logs:
- tokenizer: field splitting, numeric parsing
- classifier: blank / comment detection
- schema: header detection, column schema
- mapper: fields -> named raw / extra columns
- timeparse: ISO-8601 -> UTC
- builder: validation, Sample construction
- engine: per-parse state machine, blocking and async adapters
- reader: public entry points and the file boundary
"""

from .tokenizer import split_line, parse_float, parse_int
from .classifier import is_skippable
from .schema import SchemaResolver, ResolverState, looks_like_header
from .mapper import RowMap, map_row
from .timeparse import parse_time
from .builder import build_sample
from .engine import SampleParser, ParseCancelled, iter_samples, aiter_samples
from .reader import read, read_async, read_file, read_file_async

__all__ = [
    'split_line',
    'parse_float',
    'parse_int',
    'is_skippable',
    'SchemaResolver',
    'ResolverState',
    'looks_like_header',
    'RowMap',
    'map_row',
    'parse_time',
    'build_sample',
    'SampleParser',
    'ParseCancelled',
    'iter_samples',
    'aiter_samples',
    'read',
    'read_async',
    'read_file',
    'read_file_async',
]
