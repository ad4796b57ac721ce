"""
Canonical Columns
=================

The 12 standard FlySight columns, in file order.

    time, lat, lon, hMSL, velN, velE, velD, hAcc, vAcc, sAcc, gpsFix, numSV

Anything to the right of position 12 is an extra (vendor) column.
"""

from typing import Tuple


CANONICAL_COLUMNS: Tuple[str, ...] = (
    'time',
    'lat',
    'lon',
    'hMSL',
    'velN',
    'velE',
    'velD',
    'hAcc',
    'vAcc',
    'sAcc',
    'gpsFix',
    'numSV',
)

CANONICAL_COUNT = len(CANONICAL_COLUMNS)

# Must be present and parse, or the row is dropped
REQUIRED_COLUMNS: Tuple[str, ...] = ('time', 'lat', 'lon', 'hMSL', 'velN', 'velE', 'velD')

# Parsed independently; failure leaves the field unset
OPTIONAL_FLOAT_COLUMNS: Tuple[str, ...] = ('hAcc', 'vAcc', 'sAcc')
OPTIONAL_INT_COLUMNS: Tuple[str, ...] = ('gpsFix', 'numSV')


def synthetic_name(index: int) -> str:
    """Positional name for a column the schema does not cover (0-based index)."""
    return f'col{index + 1}'
