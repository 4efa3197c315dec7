# bluetraffic/viz/overlays/stations.py
import folium

from bluetraffic.traffic.aggregate import StationTraffic

# flow_bucket -> fill colour
DEPARTURES_COLOR = "#4682b4"  # steelblue
BALANCED_COLOR = "#a2875a"
ARRIVALS_COLOR = "#ff8c00"  # darkorange

FLOW_COLORS = {
    1.0: DEPARTURES_COLOR,
    0.5: BALANCED_COLOR,
    0.0: ARRIVALS_COLOR,
}


def traffic_tooltip(st: StationTraffic) -> str:
    return f"{st.total_traffic} trips ({st.departures} departures, {st.arrivals} arrivals)"


def station_radius(st: StationTraffic, scale) -> float:
    # stations nobody used in this window stay invisible
    if st.total_traffic == 0:
        return 0.0
    return scale(st.total_traffic)


def marker_style(st: StationTraffic, scale) -> dict:
    """
    The parts of a station circle that change with the time filter.
    Shared by the page render and the in-place updates from /traffic.json.
    """
    return {
        "radius": station_radius(st, scale),
        "fill_color": FLOW_COLORS[st.flow_bucket],
        "tooltip": traffic_tooltip(st),
    }


def add_station_markers(m, traffic, scale):
    """
    One circle per station, area proportional to total traffic.
    traffic: dict[short_name] -> StationTraffic

    Returns dict[short_name] -> JS variable name of the circle.
    """
    names = {}
    for st in traffic.values():
        style = marker_style(st, scale)
        marker = folium.CircleMarker(
            location=[st.lat, st.lon],
            radius=style["radius"],
            color="white",
            weight=1,
            fill=True,
            fill_color=style["fill_color"],
            fill_opacity=0.6,
            opacity=0.6,
            tooltip=style["tooltip"],
            popup=f"<b>{st.name}</b><br>Station: {st.short_name}",
        )
        marker.add_to(m)
        names[st.short_name] = marker.get_name()

    return names
