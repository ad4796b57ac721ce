"""
FlySight Core Types
===================

- columns: canonical column names and required/optional groups
- sample: the immutable Sample value
"""

from .columns import (
    CANONICAL_COLUMNS,
    CANONICAL_COUNT,
    REQUIRED_COLUMNS,
    OPTIONAL_FLOAT_COLUMNS,
    OPTIONAL_INT_COLUMNS,
    synthetic_name,
)
from .sample import Sample

__all__ = [
    'CANONICAL_COLUMNS',
    'CANONICAL_COUNT',
    'REQUIRED_COLUMNS',
    'OPTIONAL_FLOAT_COLUMNS',
    'OPTIONAL_INT_COLUMNS',
    'synthetic_name',
    'Sample',
]
