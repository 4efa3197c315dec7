# bluetraffic/viz/scale.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from bluetraffic.traffic.time_codec import ANY_TIME

UNFILTERED_RANGE = (0.0, 25.0)
FILTERED_RANGE = (3.0, 50.0)


def radius_range_for(time_filter: int) -> Tuple[float, float]:
    # circles get bigger when only a 2-hour window is shown
    return UNFILTERED_RANGE if time_filter == ANY_TIME else FILTERED_RANGE


@dataclass(frozen=True)
class RadiusScale:
    """
    Square-root scale from [0, max_value] onto [r_min, r_max].

    Area of a circle grows linearly with traffic.
    """
    max_value: float
    r_min: float = UNFILTERED_RANGE[0]
    r_max: float = UNFILTERED_RANGE[1]

    @classmethod
    def for_filter(cls, max_value: float, time_filter: int) -> "RadiusScale":
        r_min, r_max = radius_range_for(time_filter)
        return cls(max_value=max_value, r_min=r_min, r_max=r_max)

    def __call__(self, value: float) -> float:
        if self.max_value <= 0:
            return self.r_min
        t = math.sqrt(max(0.0, value)) / math.sqrt(self.max_value)
        return self.r_min + t * (self.r_max - self.r_min)
