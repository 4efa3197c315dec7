# bluetraffic/traffic/time_filter.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np
import pandas as pd

from bluetraffic.traffic.time_codec import (
    ANY_TIME,
    MINUTES_PER_DAY,
    minutes_since_midnight_series,
)

WINDOW_MINUTES = 60


def circular_distance(a, b):
    """
    Distance between two minutes of the day, wrapping at midnight.

    Works on plain ints and on numpy arrays / pandas Series.
    circular_distance(1439, 0) == 1, and the result is always in [0, 720].
    """
    d = np.abs(a - b) % MINUTES_PER_DAY
    return np.minimum(d, MINUTES_PER_DAY - d)


def _minutes(trips: pd.DataFrame, minute_col: str, time_col: str) -> pd.Series:
    if minute_col in trips.columns:
        return trips[minute_col]
    return minutes_since_midnight_series(trips[time_col])


def start_minutes(trips: pd.DataFrame) -> pd.Series:
    return _minutes(trips, "start_minute", "started_at")


def end_minutes(trips: pd.DataFrame) -> pd.Series:
    return _minutes(trips, "end_minute", "ended_at")


def filter_by_minute(trips: pd.DataFrame, time_filter: int) -> pd.DataFrame:
    """
    Trips that start OR end within WINDOW_MINUTES of time_filter.

    ANY_TIME returns the frame as-is. Otherwise a new frame is returned and
    `trips` is left untouched.
    """
    if time_filter == ANY_TIME:
        return trips

    near_start = circular_distance(start_minutes(trips), time_filter) <= WINDOW_MINUTES
    near_end = circular_distance(end_minutes(trips), time_filter) <= WINDOW_MINUTES
    return trips[near_start | near_end]


# ============================================================
# Minute buckets
# ============================================================
@dataclass(frozen=True)
class MinuteIndex:
    """
    Row positions grouped into one bucket per minute of the day.

    buckets[m] holds the positions of all trips whose minute is m.
    """
    buckets: List[np.ndarray]

    @classmethod
    def from_minutes(cls, minutes: pd.Series) -> "MinuteIndex":
        values = np.asarray(minutes, dtype=np.int64)
        if len(values) and (values.min() < 0 or values.max() >= MINUTES_PER_DAY):
            raise ValueError("minutes must be in [0, 1439]")

        order = np.argsort(values, kind="stable")
        counts = np.bincount(values, minlength=MINUTES_PER_DAY)
        edges = np.concatenate([[0], np.cumsum(counts)])

        buckets = [order[edges[m]:edges[m + 1]] for m in range(MINUTES_PER_DAY)]
        return cls(buckets=buckets)

    def window(self, center: int) -> np.ndarray:
        """
        Positions whose minute lies within WINDOW_MINUTES of center,
        inclusive on both sides, wrapping across midnight.
        """
        parts = [
            self.buckets[(center + k) % MINUTES_PER_DAY]
            for k in range(-WINDOW_MINUTES, WINDOW_MINUTES + 1)
        ]
        return np.concatenate(parts)


class TripWindowIndex:
    """
    Pre-grouped start and end minutes for one trip frame.

    filter(center) returns exactly what filter_by_minute(trips, center)
    returns, without scanning every trip.
    """

    def __init__(self, trips: pd.DataFrame):
        self.trips = trips
        self.by_start = MinuteIndex.from_minutes(start_minutes(trips))
        self.by_end = MinuteIndex.from_minutes(end_minutes(trips))

    def filter(self, time_filter: int) -> pd.DataFrame:
        if time_filter == ANY_TIME:
            return self.trips

        positions = np.union1d(
            self.by_start.window(time_filter),
            self.by_end.window(time_filter),
        )
        return self.trips.iloc[positions]
