import pandas as pd

from bluetraffic.traffic.aggregate import (
    StationTraffic,
    aggregate,
    compute_station_traffic,
    count_by_station,
    max_total_traffic,
)
from bluetraffic.traffic.time_codec import ANY_TIME
from conftest import make_trips


def test_single_trip_example() -> None:
    stations = [
        {"short_name": "A", "lat": 1.0, "lon": 2.0},
        {"short_name": "B", "lat": 3.0, "lon": 4.0},
    ]
    trips = make_trips([("A", "B", "08:00", "08:10")])

    out = aggregate(stations, trips)

    assert (out["A"].departures, out["A"].arrivals, out["A"].total_traffic) == (1, 0, 1)
    assert (out["B"].departures, out["B"].arrivals, out["B"].total_traffic) == (0, 1, 1)


def test_stations_without_trips_get_zero(stations) -> None:
    out = aggregate(stations, make_trips([("A", "B", "08:00", "08:10")]))
    assert list(out) == ["A", "B", "C"]
    assert out["C"].total_traffic == 0
    assert out["C"].departure_ratio == 0.0


def test_unknown_stations_are_ignored(stations, trips) -> None:
    out = aggregate(stations, trips)

    known = {s["short_name"] for s in stations}
    assert sum(st.departures for st in out.values()) == trips["start_station_id"].isin(known).sum()
    assert sum(st.arrivals for st in out.values()) == trips["end_station_id"].isin(known).sum()
    assert "Z" not in out


def test_aggregate_is_pure_and_idempotent(stations, trips) -> None:
    stations_before = [dict(s) for s in stations]
    trips_before = trips.copy()

    first = aggregate(stations, trips)
    second = aggregate(stations, trips)

    assert first == second
    assert stations == stations_before
    pd.testing.assert_frame_equal(trips, trips_before)


def test_aggregate_is_order_independent(stations, trips) -> None:
    shuffled = trips.sample(frac=1.0, random_state=3)
    a = aggregate(stations, trips)
    b = aggregate(list(reversed(stations)), shuffled)
    assert {k: v for k, v in a.items()} == {k: b[k] for k in a}


def test_compute_station_traffic_filters_first(stations, trips) -> None:
    all_day = compute_station_traffic(stations, trips, ANY_TIME)
    assert all_day["A"].total_traffic == 4

    # 08:00 window keeps A->B (08:00) and A->C (07:00); B->A ends at 06:59
    morning = compute_station_traffic(stations, trips, 480)
    assert (morning["A"].departures, morning["A"].arrivals) == (2, 0)
    assert (morning["B"].departures, morning["B"].arrivals) == (0, 1)
    assert (morning["C"].departures, morning["C"].arrivals) == (0, 1)


def test_count_by_station_empty() -> None:
    assert count_by_station(make_trips([]), "start_station_id") == {}


def test_departure_ratio_and_flow_bucket() -> None:
    def st(dep, arr):
        return StationTraffic("X", "X", 0.0, 0.0, dep, arr)

    assert st(0, 0).departure_ratio == 0.0
    assert st(3, 1).departure_ratio == 0.75
    assert st(0, 0).flow_bucket == 0.0
    assert st(1, 3).flow_bucket == 0.0
    assert st(1, 1).flow_bucket == 0.5
    assert st(3, 1).flow_bucket == 1.0
    assert st(5, 0).flow_bucket == 1.0


def test_max_total_traffic(stations, trips) -> None:
    assert max_total_traffic({}) == 0
    assert max_total_traffic(aggregate(stations, trips)) == 4
