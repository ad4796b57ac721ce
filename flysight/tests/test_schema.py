"""
Test Line Classifier, Schema Resolver and Row Mapper
====================================================
"""

import pytest

from flysight.core.columns import CANONICAL_COLUMNS
from flysight.stream.classifier import is_skippable
from flysight.stream.mapper import map_row
from flysight.stream.schema import ResolverState, SchemaResolver, looks_like_header


@pytest.mark.parametrize('line', ['', '   ', '\t', '\ufeff', '\ufeff  ', '# comment', '  #x', '\ufeff# c'])
def test_skippable(line):
    """Blank, BOM-only and comment lines are skipped."""
    assert is_skippable(line)


@pytest.mark.parametrize('line', ['time,lat', '2025-01-01T00:00:00Z,1,2', 'a#b', '\ufefftime'])
def test_not_skippable(line):
    """Anything else is content."""
    assert not is_skippable(line)


def test_header_detection_threshold():
    """Three positional matches make a header, two do not."""
    assert looks_like_header(['time', 'lat', 'lon'])
    assert looks_like_header([' TIME ', 'Lat', 'x', 'hmsl'])
    assert not looks_like_header(['time', 'lat', 'x'])
    assert not looks_like_header(['lat', 'time', 'lon'])  # positions matter
    assert not looks_like_header([])


def test_header_detection_custom_threshold():
    """min_matches is configurable."""
    assert looks_like_header(['time', 'x'], min_matches=1)
    assert not looks_like_header(['time', 'lat', 'lon'], min_matches=4)


def test_resolver_header_branch():
    """Header line becomes the trimmed schema, extra names included."""
    resolver = SchemaResolver()
    assert resolver.state is ResolverState.AWAITING_FIRST_CONTENT_LINE

    is_header = resolver.resolve([' time', 'lat ', 'lon', 'hMSL', 'extra1'])

    assert is_header
    assert resolver.state is ResolverState.SCHEMA_ESTABLISHED
    assert resolver.schema == ('time', 'lat', 'lon', 'hMSL', 'extra1')


def test_resolver_data_branch():
    """Data line falls back to the canonical schema."""
    resolver = SchemaResolver()
    assert not resolver.resolve(['2025-01-01T00:00:00Z', '1', '2'])
    assert resolver.schema == CANONICAL_COLUMNS


def test_resolver_runs_once():
    """A second resolve is an error; schema access before resolve too."""
    resolver = SchemaResolver()
    with pytest.raises(RuntimeError):
        resolver.schema
    resolver.resolve(['x'])
    with pytest.raises(RuntimeError):
        resolver.resolve(['time', 'lat', 'lon'])


def test_map_row_canonical():
    """Twelve fields map to canonical names, nothing extra."""
    fields = [str(i) for i in range(12)]
    row = map_row(fields, CANONICAL_COLUMNS)
    assert list(row.raw) == list(CANONICAL_COLUMNS)
    assert row.extra == {}


def test_map_row_synthetic_names():
    """Fields past the schema get colN names; index >= 12 goes to extra."""
    fields = [str(i) for i in range(14)]
    row = map_row(fields, ('time', 'lat', 'lon'))

    assert list(row.raw)[:4] == ['time', 'lat', 'lon', 'col4']
    assert list(row.raw)[-2:] == ['col13', 'col14']
    assert list(row.extra.items()) == [('col13', '12'), ('col14', '13')]


def test_map_row_short_row():
    """Missing trailing fields are simply absent."""
    row = map_row(['2025-01-01T00:00:00Z', '1'], ('time', 'lat', 'lon'))
    assert row.raw == {'time': '2025-01-01T00:00:00Z', 'lat': '1'}


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
