# bluetraffic/traffic/aggregate.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

import pandas as pd

from bluetraffic.traffic.time_codec import ANY_TIME
from bluetraffic.traffic.time_filter import filter_by_minute

# scaleQuantize over [0, 1] with three output levels
FLOW_LEVELS = (0.0, 0.5, 1.0)


@dataclass(frozen=True)
class StationTraffic:
    short_name: str
    name: str
    lat: float
    lon: float
    departures: int
    arrivals: int

    @property
    def total_traffic(self) -> int:
        return self.departures + self.arrivals

    @property
    def departure_ratio(self) -> float:
        total = self.total_traffic
        if total == 0:
            return 0.0
        return self.departures / total

    @property
    def flow_bucket(self) -> float:
        """
        departure_ratio quantized into FLOW_LEVELS:
          [0, 1/3) -> 0.0 (mostly arrivals)
          [1/3, 2/3) -> 0.5 (balanced)
          [2/3, 1] -> 1.0 (mostly departures)
        """
        n = len(FLOW_LEVELS)
        idx = min(int(self.departure_ratio * n), n - 1)
        return FLOW_LEVELS[idx]


def count_by_station(trips: pd.DataFrame, column: str) -> Dict[str, int]:
    if trips.empty:
        return {}
    counts = trips.groupby(column).size()
    return {str(sid): int(n) for sid, n in counts.items()}


def aggregate(stations: List[dict], trips: pd.DataFrame) -> Dict[str, StationTraffic]:
    """
    Per-station departure / arrival counts for a set of trips.

    Every station gets a record, with zeros when no trip touches it.
    Trips naming unknown stations are ignored. Neither input is modified;
    the result is a new dict keyed by short_name, in station order.
    """
    departures = count_by_station(trips, "start_station_id")
    arrivals = count_by_station(trips, "end_station_id")

    out: Dict[str, StationTraffic] = {}
    for s in stations:
        sid = str(s["short_name"])
        out[sid] = StationTraffic(
            short_name=sid,
            name=s.get("name", sid),
            lat=float(s["lat"]),
            lon=float(s["lon"]),
            departures=departures.get(sid, 0),
            arrivals=arrivals.get(sid, 0),
        )
    return out


def compute_station_traffic(
    stations: List[dict],
    trips: pd.DataFrame,
    time_filter: int = ANY_TIME,
) -> Dict[str, StationTraffic]:
    return aggregate(stations, filter_by_minute(trips, time_filter))


def max_total_traffic(traffic: Dict[str, StationTraffic]) -> int:
    return max((st.total_traffic for st in traffic.values()), default=0)
