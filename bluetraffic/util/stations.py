# bluetraffic/util/stations.py
import math

from colorama import Fore, Style

from bluetraffic.errors import DataLoadError
from bluetraffic.util.sources import fetch_json


def _coord(value):
    """
    float(value), or None when the coordinate is missing / not numeric.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        x = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(x):
        return None
    return x


def parse_stations(raw):
    """
    Keep only the fields we care about from GBFS station records.
    Entries that are not objects, or have no usable lat/lon, are dropped.
    """
    stations = []
    for s in raw:
        if not isinstance(s, dict):
            continue

        lat = _coord(s.get("lat"))
        lon = _coord(s.get("lon"))
        if lat is None or lon is None:
            continue

        sid = str(s["short_name"])
        stations.append({
            "short_name": sid,
            "name": s.get("name", sid),
            "lat": lat,
            "lon": lon,
        })

    return stations


def load_stations(source):
    """
    Load Bluebikes stations from a station information JSON (path or URL).
    Returns a list of dicts: short_name, name, lat, lon.
    """
    doc = fetch_json(source)

    try:
        raw = doc["data"]["stations"]
    except (KeyError, TypeError):
        raise DataLoadError(f"{source} has no data.stations list") from None
    if not isinstance(raw, list):
        raise DataLoadError(f"{source}: data.stations is not a list")

    try:
        stations = parse_stations(raw)
    except KeyError as e:
        raise DataLoadError(f"{source}: station record missing {e}") from None

    if raw and not stations:
        raise DataLoadError(f"{source}: none of {len(raw)} station records are usable")

    dropped = len(raw) - len(stations)
    if dropped:
        print(f"{Fore.YELLOW}Dropped {dropped} malformed stations{Style.RESET_ALL}")

    return stations
