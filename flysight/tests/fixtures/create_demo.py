"""Create synthetic FlySight logs for testing."""

from datetime import datetime, timedelta, timezone
from typing import Iterator, Optional

import numpy as np

from flysight.core.columns import CANONICAL_COLUMNS

HEADER = ','.join(CANONICAL_COLUMNS)
T0 = datetime(2025, 1, 1, tzinfo=timezone.utc)


def demo_lines(n: int = 1000, header: bool = True, seed: int = 42,
               start: Optional[datetime] = None) -> Iterator[str]:
    """
    Yield a header (optional) and `n` data lines of a descending jump.

    Lines are generated on demand, so very long logs cost no memory.
    """
    rng = np.random.default_rng(seed)
    t0 = start or T0

    if header:
        yield HEADER

    lat, lon, h = 45.0, -75.0, 4000.0
    for i in range(n):
        t = t0 + timedelta(milliseconds=200 * i)
        vel_n = 20.0 + rng.normal(0, 0.5)
        vel_e = rng.normal(0, 0.5)
        vel_d = min(55.0, 9.81 * 0.2 * i)

        lat += vel_n * 0.2 / 111_320
        lon += vel_e * 0.2 / 78_710
        h -= vel_d * 0.2

        yield (
            f"{t.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3]}Z,"
            f"{lat:.7f},{lon:.7f},{h:.3f},"
            f"{vel_n:.2f},{vel_e:.2f},{vel_d:.2f},"
            f"{abs(rng.normal(3, 1)):.3f},{abs(rng.normal(4, 1)):.3f},{abs(rng.normal(0.5, 0.1)):.2f},"
            f"3,{int(rng.integers(6, 14))}"
        )


def create_demo_log(output_path: str = 'demo_track.csv', n: int = 1000) -> None:
    """Write a demo log to disk."""
    with open(output_path, 'w', encoding='utf-8') as f:
        for line in demo_lines(n):
            f.write(line + '\n')

    print(f"Created {output_path} with {n} rows")


if __name__ == '__main__':
    create_demo_log()
