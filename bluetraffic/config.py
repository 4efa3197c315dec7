# bluetraffic/config.py
from __future__ import annotations

import os
from dataclasses import dataclass

STATIONS_URL = "https://dsc106.com/labs/lab07/data/bluebikes-stations.json"
TRIPS_CSV = "https://dsc106.com/labs/lab07/data/bluebikes-traffic-2024-03.csv"

# Boston
CENTER_LAT = 42.3601
CENTER_LON = -71.0589
ZOOM_START = 12

DEFAULT_TITLE = "Bluebikes Traffic"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    stations_source: str = STATIONS_URL
    trips_source: str = TRIPS_CSV
    host: str = "127.0.0.1"
    port: int = 8080
    title: str = DEFAULT_TITLE
    show_bike_lanes: bool = True
    use_minute_index: bool = True
    export_csv: str | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            stations_source=os.environ.get("STATIONS_URL", STATIONS_URL),
            trips_source=os.environ.get("TRIPS_CSV", TRIPS_CSV),
            host=os.environ.get("HOST", "127.0.0.1"),
            port=_env_int("PORT", 8080),
            title=os.environ.get("MAP_TITLE", DEFAULT_TITLE),
            show_bike_lanes=_env_flag("SHOW_BIKE_LANES", True),
            use_minute_index=_env_flag("USE_MINUTE_INDEX", True),
            export_csv=os.environ.get("EXPORT_CSV") or None,
        )
