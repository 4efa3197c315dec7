# bluetraffic/traffic/export.py
from __future__ import annotations

from pathlib import Path
from typing import Dict

import pandas as pd
from tqdm import tqdm

from bluetraffic.traffic.aggregate import StationTraffic
from bluetraffic.traffic.time_codec import ANY_TIME, MINUTES_PER_DAY

COLUMNS = [
    "short_name",
    "lat",
    "lon",
    "departures",
    "arrivals",
    "total_traffic",
    "departure_ratio",
]


def traffic_frame(traffic: Dict[str, StationTraffic]) -> pd.DataFrame:
    rows = [
        {
            "short_name": st.short_name,
            "lat": st.lat,
            "lon": st.lon,
            "departures": st.departures,
            "arrivals": st.arrivals,
            "total_traffic": st.total_traffic,
            "departure_ratio": st.departure_ratio,
        }
        for st in traffic.values()
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def write_hourly_traffic_csv(dataset, out_path: str | Path) -> Path:
    """
    Writes one block of station rows per time filter:
      time_filter = -1 (all trips), then 0, 60, ..., 1380
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    centers = [ANY_TIME] + list(range(0, MINUTES_PER_DAY, 60))

    frames = []
    for t in tqdm(centers, desc="Aggregating traffic"):
        df = traffic_frame(dataset.traffic_at(t))
        df.insert(0, "time_filter", t)
        frames.append(df)

    pd.concat(frames, ignore_index=True).to_csv(out_path, index=False)
    return out_path
