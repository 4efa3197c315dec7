# bluetraffic/traffic/dataset.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd
from colorama import Fore, Style

from bluetraffic.errors import DataLoadError
from bluetraffic.traffic.aggregate import StationTraffic, aggregate
from bluetraffic.traffic.time_codec import ANY_TIME, validate_time_filter
from bluetraffic.traffic.time_filter import TripWindowIndex, filter_by_minute
from bluetraffic.util.stations import load_stations
from bluetraffic.util.trips import empty_trips, load_trips


@dataclass
class TrafficDataset:
    """
    Stations + one month of trips, loaded once per process.

    If loading failed, stations/trips are empty and load_error holds the
    message the map page should show.
    """
    stations: List[dict] = field(default_factory=list)
    trips: pd.DataFrame = field(default_factory=empty_trips)
    load_error: Optional[str] = None
    index: Optional[TripWindowIndex] = None

    @classmethod
    def from_frames(
        cls,
        stations: List[dict],
        trips: pd.DataFrame,
        *,
        use_minute_index: bool = True,
    ) -> "TrafficDataset":
        index = TripWindowIndex(trips) if use_minute_index else None
        return cls(stations=stations, trips=trips, index=index)

    @classmethod
    def load(
        cls,
        stations_source: str | Path,
        trips_source: str | Path,
        *,
        use_minute_index: bool = True,
    ) -> "TrafficDataset":
        try:
            print(f"{Fore.CYAN}Loading stations from {stations_source}…{Style.RESET_ALL}")
            stations = load_stations(stations_source)
            print(f"{Fore.CYAN}Loaded {len(stations)} stations{Style.RESET_ALL}")

            print(f"{Fore.CYAN}Loading trips from {trips_source}…{Style.RESET_ALL}")
            trips = load_trips(trips_source)
            print(f"{Fore.CYAN}Loaded {len(trips):,} trips{Style.RESET_ALL}")
        except DataLoadError as e:
            print(f"{Fore.RED}Data load failed: {e}{Style.RESET_ALL}")
            return cls(load_error=str(e))

        return cls.from_frames(stations, trips, use_minute_index=use_minute_index)

    @property
    def ok(self) -> bool:
        return self.load_error is None

    def trips_at(self, time_filter: int = ANY_TIME) -> pd.DataFrame:
        time_filter = validate_time_filter(time_filter)
        if self.index is not None:
            return self.index.filter(time_filter)
        return filter_by_minute(self.trips, time_filter)

    def traffic_at(self, time_filter: int = ANY_TIME) -> Dict[str, StationTraffic]:
        return aggregate(self.stations, self.trips_at(time_filter))
