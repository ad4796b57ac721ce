"""
Row Mapper
==========

Pair tokenized fields with the active schema.

Fields past the end of the schema get positional names (col13, col14, ...).
Fields at position 12 or later are also copied into `extra`.
"""

from typing import Dict, List, NamedTuple, Sequence

from flysight.core.columns import CANONICAL_COUNT, synthetic_name


class RowMap(NamedTuple):
    """Column name -> raw string, for every field and for the extra ones."""
    raw: Dict[str, str]
    extra: Dict[str, str]


def map_row(fields: List[str], schema: Sequence[str]) -> RowMap:
    raw: Dict[str, str] = {}
    extra: Dict[str, str] = {}
    width = len(schema)

    for i, value in enumerate(fields):
        name = schema[i] if i < width else synthetic_name(i)
        raw[name] = value
        if i >= CANONICAL_COUNT:
            extra[name] = value

    return RowMap(raw=raw, extra=extra)
