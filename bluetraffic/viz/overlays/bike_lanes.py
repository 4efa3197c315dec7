# bluetraffic/viz/overlays/bike_lanes.py
import folium
from colorama import Fore, Style

from bluetraffic.errors import DataLoadError
from bluetraffic.util.sources import fetch_json

BIKE_LANE_SOURCES = [
    (
        "Boston bike lanes",
        "https://bostonopendata-boston.opendata.arcgis.com/datasets/boston::existing-bike-network-2022.geojson",
        "#2ecc71",
    ),
    (
        "Cambridge bike lanes",
        "https://raw.githubusercontent.com/cambridgegis/cambridgegis_data/main/Recreation/Bike_Facilities/RECREATION_BikeFacilities.geojson",
        "#27ae60",
    ),
]


def load_bike_lanes(sources=BIKE_LANE_SOURCES):
    """
    Fetch each lane network once. A network that fails to load is skipped;
    the stations map is still useful without it.

    Returns list of (name, geojson dict, color).
    """
    lanes = []
    for name, source, color in sources:
        try:
            lanes.append((name, fetch_json(source), color))
        except DataLoadError as e:
            print(f"{Fore.YELLOW}Skipping {name}: {e}{Style.RESET_ALL}")
    return lanes


def add_bike_lanes(m, lanes):
    for name, geojson, color in lanes:
        folium.GeoJson(
            geojson,
            name=name,
            style_function=lambda _feature, color=color: {
                "color": color,
                "weight": 3,
                "opacity": 1.0,
            },
        ).add_to(m)
