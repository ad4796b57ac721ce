"""
Frame Export
============

Materialize a sample sequence for analysis and plotting.

    to_frame(samples)              -> polars DataFrame, one row per sample
    to_array(samples, 'height_msl') -> numpy float array

Both consume the whole sequence.
"""

from typing import Dict, Iterable, List

import numpy as np
import polars as pl

from flysight.core.sample import Sample


FRAME_SCHEMA = {
    'time': pl.Datetime('us', 'UTC'),
    'latitude': pl.Float64,
    'longitude': pl.Float64,
    'height_msl': pl.Float64,
    'velocity_north': pl.Float64,
    'velocity_east': pl.Float64,
    'velocity_down': pl.Float64,
    'horizontal_accuracy': pl.Float64,
    'vertical_accuracy': pl.Float64,
    'speed_accuracy': pl.Float64,
    'gps_fix': pl.Int64,
    'satellite_count': pl.Int64,
    'speed_3d': pl.Float64,
}


def to_frame(samples: Iterable[Sample]) -> pl.DataFrame:
    """
    Collect samples into a DataFrame.

    Optional fields become nulls. Raw and extra columns are not included;
    they stay on the Sample objects.
    """
    columns: Dict[str, List] = {name: [] for name in FRAME_SCHEMA}

    for s in samples:
        for name, values in columns.items():
            values.append(getattr(s, name))

    return pl.DataFrame(columns, schema=FRAME_SCHEMA)


def to_array(samples: Iterable[Sample], field: str) -> np.ndarray:
    """
    Pull one numeric field into a float64 array.

    Missing optional values become NaN in the array.

    Raises:
        ValueError: If `field` is not a numeric sample field
    """
    if field not in FRAME_SCHEMA or field == 'time':
        raise ValueError(f"Unknown numeric field: {field}")

    values = [getattr(s, field) for s in samples]
    return np.array([np.nan if v is None else v for v in values], dtype=np.float64)
