# bluetraffic/util/trips.py
from __future__ import annotations

from pathlib import Path

import pandas as pd
from colorama import Fore, Style

from bluetraffic.errors import DataLoadError
from bluetraffic.traffic.time_codec import minutes_since_midnight_series

REQUIRED_COLUMNS = [
    "start_station_id",
    "end_station_id",
    "started_at",
    "ended_at",
]


def empty_trips() -> pd.DataFrame:
    return pd.DataFrame({
        "start_station_id": pd.Series(dtype=str),
        "end_station_id": pd.Series(dtype=str),
        "started_at": pd.Series(dtype="datetime64[ns]"),
        "ended_at": pd.Series(dtype="datetime64[ns]"),
        "start_minute": pd.Series(dtype=int),
        "end_minute": pd.Series(dtype=int),
    })


def clean_trips(df: pd.DataFrame) -> pd.DataFrame:
    """
    Normalize a raw trips frame into:
      - start_station_id (str)
      - end_station_id (str)
      - started_at (datetime)
      - ended_at (datetime)
      - start_minute (0..1439)
      - end_minute (0..1439)

    Rows whose timestamps do not parse are dropped.
    """
    colmap = {c.strip(): c for c in df.columns}
    missing = [c for c in REQUIRED_COLUMNS if c not in colmap]
    if missing:
        raise DataLoadError(f"Trips CSV missing columns: {', '.join(missing)}")

    out = pd.DataFrame()
    out["start_station_id"] = df[colmap["start_station_id"]].astype(str).str.strip()
    out["end_station_id"] = df[colmap["end_station_id"]].astype(str).str.strip()
    out["started_at"] = pd.to_datetime(df[colmap["started_at"]], format="ISO8601", errors="coerce")
    out["ended_at"] = pd.to_datetime(df[colmap["ended_at"]], format="ISO8601", errors="coerce")

    out = out.dropna(subset=["started_at", "ended_at"]).reset_index(drop=True)

    out["start_minute"] = minutes_since_midnight_series(out["started_at"])
    out["end_minute"] = minutes_since_midnight_series(out["ended_at"])

    return out


def load_trips(source: str | Path) -> pd.DataFrame:
    """
    Load a Bluebikes trips CSV (local path or URL).
    """
    try:
        df = pd.read_csv(source, dtype={"start_station_id": str, "end_station_id": str})
    except (OSError, ValueError) as e:
        raise DataLoadError(f"cannot read trips from {source}: {e}") from e

    trips = clean_trips(df)

    dropped = len(df) - len(trips)
    if dropped:
        print(f"{Fore.YELLOW}Dropped {dropped} trips with unparseable timestamps{Style.RESET_ALL}")

    return trips
