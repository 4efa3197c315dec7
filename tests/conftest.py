from __future__ import annotations

import pandas as pd
import pytest

from bluetraffic.util.trips import clean_trips


def make_trips(rows) -> pd.DataFrame:
    """
    rows: (start_id, end_id, "HH:MM" started, "HH:MM" ended)
    """
    raw = pd.DataFrame(
        [
            {
                "start_station_id": s0,
                "end_station_id": s1,
                "started_at": f"2024-03-01 {t0}:00",
                "ended_at": f"2024-03-01 {t1}:00",
            }
            for s0, s1, t0, t1 in rows
        ],
        columns=["start_station_id", "end_station_id", "started_at", "ended_at"],
    )
    return clean_trips(raw)


@pytest.fixture
def stations():
    return [
        {"short_name": "A", "name": "Alpha", "lat": 42.36, "lon": -71.06},
        {"short_name": "B", "name": "Bravo", "lat": 42.37, "lon": -71.07},
        {"short_name": "C", "name": "Charlie", "lat": 42.35, "lon": -71.05},
    ]


@pytest.fixture
def trips():
    return make_trips([
        ("A", "B", "08:00", "08:10"),
        ("A", "C", "07:00", "07:20"),
        ("B", "A", "06:30", "06:59"),
        ("C", "A", "23:30", "23:50"),
        ("B", "Z", "12:00", "12:15"),
    ])
