import pytest

from bluetraffic.config import STATIONS_URL, Settings


def test_defaults(monkeypatch) -> None:
    for name in ("STATIONS_URL", "TRIPS_CSV", "PORT", "SHOW_BIKE_LANES", "USE_MINUTE_INDEX", "EXPORT_CSV"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()
    assert settings.stations_source == STATIONS_URL
    assert settings.port == 8080
    assert settings.show_bike_lanes
    assert settings.export_csv is None


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("SHOW_BIKE_LANES", "0")
    monkeypatch.setenv("USE_MINUTE_INDEX", "false")
    monkeypatch.setenv("EXPORT_CSV", "out.csv")

    settings = Settings.from_env()
    assert settings.port == 9000
    assert not settings.show_bike_lanes
    assert not settings.use_minute_index
    assert settings.export_csv == "out.csv"


def test_bad_port(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "eighty")
    with pytest.raises(ValueError, match="PORT"):
        Settings.from_env()
