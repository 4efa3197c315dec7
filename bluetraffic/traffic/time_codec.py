# bluetraffic/traffic/time_codec.py
from __future__ import annotations

from datetime import datetime

import pandas as pd

MINUTES_PER_DAY = 1440
ANY_TIME = -1

ANY_TIME_LABEL = "(any time)"


def minutes_since_midnight(ts: datetime) -> int:
    """
    Wall-clock minute of the day for a timestamp (seconds are ignored).
    """
    return ts.hour * 60 + ts.minute


def minutes_since_midnight_series(times: pd.Series) -> pd.Series:
    # NaT rows must be dropped by the loader before we get here
    return (times.dt.hour * 60 + times.dt.minute).astype(int)


def format_time(minutes: int) -> str:
    """
    Format minutes since midnight as a short 12-hour clock label.

      0    -> "12:00 AM"
      480  -> "8:00 AM"
      1439 -> "11:59 PM"
    """
    minutes = int(minutes)
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise ValueError(f"minutes must be in [0, {MINUTES_PER_DAY - 1}], got {minutes}")

    hour, minute = divmod(minutes, 60)
    suffix = "AM" if hour < 12 else "PM"
    hour12 = hour % 12 or 12
    return f"{hour12}:{minute:02d} {suffix}"


def validate_time_filter(value) -> int:
    """
    A time filter is either ANY_TIME (-1) or a minute of the day in [0, 1439].
    """
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"time filter must be a whole minute, got {value!r}")

    try:
        t = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"time filter must be an integer, got {value!r}") from None

    if t != ANY_TIME and not 0 <= t < MINUTES_PER_DAY:
        raise ValueError(
            f"time filter must be {ANY_TIME} or in [0, {MINUTES_PER_DAY - 1}], got {t}"
        )
    return t


def format_time_filter(time_filter: int) -> str:
    if time_filter == ANY_TIME:
        return ANY_TIME_LABEL
    return format_time(time_filter)
