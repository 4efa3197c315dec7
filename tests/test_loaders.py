import json

import pytest

from bluetraffic.errors import DataLoadError
from bluetraffic.util.sources import fetch_json, is_url
from bluetraffic.util.stations import load_stations, parse_stations
from bluetraffic.util.trips import load_trips


def _write_stations(path, stations):
    path.write_text(json.dumps({"data": {"stations": stations}}))
    return path


def test_is_url() -> None:
    assert is_url("https://example.com/x.json")
    assert not is_url("data/stations.json")


def test_parse_stations_drops_bad_coordinates() -> None:
    raw = [
        {"short_name": "A", "name": "Alpha", "lat": 42.3, "lon": -71.1},
        {"short_name": "B", "name": "Bravo", "lat": "42.4", "lon": "-71.0"},
        {"short_name": "C", "name": "Charlie", "lat": None, "lon": -71.0},
        {"short_name": "D", "name": "Delta", "lat": "n/a", "lon": -71.0},
        {"short_name": "E", "name": "Echo", "lat": 42.0},
    ]
    stations = parse_stations(raw)

    assert [s["short_name"] for s in stations] == ["A", "B"]
    assert stations[1]["lat"] == 42.4


def test_load_stations_from_file(tmp_path) -> None:
    path = _write_stations(tmp_path / "stations.json", [
        {"short_name": 10, "name": "Ten", "lat": 42.1, "lon": -71.1, "capacity": 5},
    ])
    stations = load_stations(path)
    assert stations == [
        {"short_name": "10", "name": "Ten", "lat": 42.1, "lon": -71.1},
    ]


def test_load_stations_errors(tmp_path) -> None:
    with pytest.raises(DataLoadError):
        load_stations(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(DataLoadError):
        load_stations(bad)

    wrong = tmp_path / "wrong.json"
    wrong.write_text(json.dumps({"stations": []}))
    with pytest.raises(DataLoadError):
        load_stations(wrong)

    no_id = _write_stations(tmp_path / "noid.json", [{"lat": 1, "lon": 2}])
    with pytest.raises(DataLoadError):
        load_stations(no_id)


def test_fetch_json_reads_local_file(tmp_path) -> None:
    path = tmp_path / "doc.json"
    path.write_text('{"a": 1}')
    assert fetch_json(path) == {"a": 1}


def test_load_trips(tmp_path) -> None:
    path = tmp_path / "trips.csv"
    path.write_text(
        "ride_id,start_station_id,end_station_id,started_at,ended_at\n"
        "r1,A32000,B1,2024-03-01 08:05:12.123,2024-03-01 08:20:00\n"
        "r2,007,A32000,2024-03-01 23:59:00,2024-03-02 00:10:00\n"
        "r3,A32000,B1,garbage,2024-03-01 08:20:00\n"
    )
    trips = load_trips(path)

    assert len(trips) == 2
    assert trips["start_station_id"].tolist() == ["A32000", "007"]
    assert trips["start_minute"].tolist() == [485, 1439]
    assert trips["end_minute"].tolist() == [500, 10]


def test_load_trips_missing_columns(tmp_path) -> None:
    path = tmp_path / "trips.csv"
    path.write_text("start_station_id,started_at\nA,2024-03-01 08:00:00\n")
    with pytest.raises(DataLoadError, match="end_station_id"):
        load_trips(path)


def test_load_trips_missing_file(tmp_path) -> None:
    with pytest.raises(DataLoadError):
        load_trips(tmp_path / "nope.csv")


def test_parse_stations_skips_non_objects() -> None:
    raw = [None, "A", 3, {"short_name": "B", "lat": 42.0, "lon": -71.0, "capacity": "n/a"}]
    assert parse_stations(raw) == [
        {"short_name": "B", "name": "B", "lat": 42.0, "lon": -71.0},
    ]


def test_load_stations_rejects_non_list(tmp_path) -> None:
    path = tmp_path / "stations.json"
    path.write_text(json.dumps({"data": {"stations": {"A": {}}}}))
    with pytest.raises(DataLoadError):
        load_stations(path)
