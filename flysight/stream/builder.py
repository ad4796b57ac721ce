"""
Sample Builder
==============

Turn a mapped row into a Sample, or drop it.

Required (row dropped if missing or unparseable):
    time, lat, lon, hMSL, velN, velE, velD

Optional (left as None if missing or unparseable):
    hAcc, vAcc, sAcc, gpsFix, numSV

Dropping is the normal outcome for malformed rows, so it is signalled by
returning None rather than by raising.
"""

from typing import Optional

from flysight.core.sample import Sample
from flysight.stream.mapper import RowMap
from flysight.stream.timeparse import parse_time
from flysight.stream.tokenizer import parse_float, parse_int


def build_sample(row: RowMap) -> Optional[Sample]:
    """
    Validate a mapped row and build its Sample.

    Args:
        row: Output of map_row

    Returns:
        Sample, or None if a required field is missing or invalid
    """
    raw = row.raw

    time = parse_time(raw.get('time'))
    if time is None:
        return None

    required = {}
    for key, attr in (
        ('lat', 'latitude'),
        ('lon', 'longitude'),
        ('hMSL', 'height_msl'),
        ('velN', 'velocity_north'),
        ('velE', 'velocity_east'),
        ('velD', 'velocity_down'),
    ):
        value = parse_float(raw.get(key))
        if value is None:
            return None
        required[attr] = value

    return Sample(
        time=time,
        **required,
        horizontal_accuracy=parse_float(raw.get('hAcc')),
        vertical_accuracy=parse_float(raw.get('vAcc')),
        speed_accuracy=parse_float(raw.get('sAcc')),
        gps_fix=parse_int(raw.get('gpsFix')),
        satellite_count=parse_int(raw.get('numSV')),
        raw=row.raw,
        extra=row.extra,
    )
