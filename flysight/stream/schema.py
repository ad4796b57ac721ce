"""
Schema Resolver
===============

Decide, on the first content line, whether the log has a header.

    AWAITING_FIRST_CONTENT_LINE --(first content line)--> SCHEMA_ESTABLISHED

A line is a header when at least `min_matches` of its leading fields
(up to 12) equal the canonical column name at the same position,
ignoring case and surrounding whitespace. A header line yields its own
trimmed names as the schema; anything else is data, the canonical
schema applies, and the line is mapped like every other data row.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple

from flysight.core.columns import CANONICAL_COLUMNS


DEFAULT_MIN_HEADER_MATCHES = 3


class ResolverState(Enum):
    AWAITING_FIRST_CONTENT_LINE = 'awaiting_first_content_line'
    SCHEMA_ESTABLISHED = 'schema_established'


def header_matches(fields: Sequence[str]) -> int:
    """Count positions whose trimmed field equals the canonical name (case-insensitive)."""
    return sum(
        1
        for field, canonical in zip(fields, CANONICAL_COLUMNS)
        if field.strip().lower() == canonical.lower()
    )


def looks_like_header(
    fields: Sequence[str],
    min_matches: int = DEFAULT_MIN_HEADER_MATCHES,
) -> bool:
    """True if the tokenized line reads as a column header."""
    if not fields:
        return False
    return header_matches(fields) >= min_matches


class SchemaResolver:
    """
    One-shot schema resolution for a single parse.

    Usage:
        resolver = SchemaResolver()
        is_header = resolver.resolve(fields)   # first content line only
        resolver.schema                        # fixed from here on
    """

    def __init__(self, min_matches: int = DEFAULT_MIN_HEADER_MATCHES):
        self.min_matches = min_matches
        self.state = ResolverState.AWAITING_FIRST_CONTENT_LINE
        self._schema: Optional[Tuple[str, ...]] = None

    @property
    def established(self) -> bool:
        return self.state is ResolverState.SCHEMA_ESTABLISHED

    @property
    def schema(self) -> Tuple[str, ...]:
        if self._schema is None:
            raise RuntimeError("Schema not established: no content line seen yet")
        return self._schema

    def resolve(self, fields: Sequence[str]) -> bool:
        """
        Establish the schema from the first content line.

        Args:
            fields: Tokenized first content line

        Returns:
            True if the line was a header (and produces no sample),
            False if it is data under the canonical schema.

        Raises:
            RuntimeError: If the schema was already established
        """
        if self.established:
            raise RuntimeError("Schema already established for this parse")

        if looks_like_header(fields, self.min_matches):
            self._schema = tuple(f.strip() for f in fields)
            is_header = True
        else:
            self._schema = CANONICAL_COLUMNS
            is_header = False

        self.state = ResolverState.SCHEMA_ESTABLISHED
        return is_header
