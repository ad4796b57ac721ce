"""
Sample
======

One parsed, validated row of a FlySight log.

Samples are immutable. The raw and extra column maps are exposed as
read-only views over ordered dicts, so column order is file order.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class Sample:
    """
    A single GPS fix from the log.

    Units follow the file: degrees for latitude/longitude, meters for
    height and accuracies, m/s for velocities and speed accuracy.

    Attributes:
        time: UTC instant of the fix (tz-aware, always ``timezone.utc``)
        raw: Every column on the row, name -> original string
        extra: Columns beyond the 12 canonical ones, same order as ``raw``
    """
    time: datetime
    latitude: float
    longitude: float
    height_msl: float
    velocity_north: float
    velocity_east: float
    velocity_down: float
    horizontal_accuracy: Optional[float] = None
    vertical_accuracy: Optional[float] = None
    speed_accuracy: Optional[float] = None
    gps_fix: Optional[int] = None
    satellite_count: Optional[int] = None
    raw: Mapping[str, str] = field(default_factory=dict, hash=False, repr=False)
    extra: Mapping[str, str] = field(default_factory=dict, hash=False, repr=False)

    def __post_init__(self):
        # Freeze the column maps; callers may hand in plain dicts
        if not isinstance(self.raw, MappingProxyType):
            object.__setattr__(self, 'raw', MappingProxyType(dict(self.raw)))
        if not isinstance(self.extra, MappingProxyType):
            object.__setattr__(self, 'extra', MappingProxyType(dict(self.extra)))

    @property
    def speed_3d(self) -> float:
        """Magnitude of the (north, east, down) velocity vector in m/s."""
        return math.sqrt(
            self.velocity_north ** 2
            + self.velocity_east ** 2
            + self.velocity_down ** 2
        )

    @property
    def ground_speed(self) -> float:
        """Horizontal speed in m/s."""
        return math.hypot(self.velocity_north, self.velocity_east)
