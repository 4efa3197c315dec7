# bluetraffic/viz/maps/render.py
import json

import folium

from bluetraffic.config import CENTER_LAT, CENTER_LON, ZOOM_START
from bluetraffic.traffic.aggregate import max_total_traffic
from bluetraffic.viz.overlays.bike_lanes import add_bike_lanes
from bluetraffic.viz.overlays.stations import add_station_markers
from bluetraffic.viz.scale import RadiusScale
from bluetraffic.viz.widgets.legend import build_legend_widget
from bluetraffic.viz.widgets.time_slider import build_time_slider


def render_map_document(
    *,
    traffic,
    time_filter: int,
    domain_max: int | None = None,
    title: str | None = None,
    bike_lanes=None,
):
    """
    Single place that assembles the full Folium map HTML document.

    traffic: dict[short_name] -> StationTraffic for this time filter
    domain_max: top of the radius scale domain; the all-day busiest station
      so circles stay comparable across time filters
    bike_lanes: output of load_bike_lanes(), or None to skip
    """
    m = folium.Map(
        location=[CENTER_LAT, CENTER_LON],
        zoom_start=ZOOM_START,
        tiles="cartodbpositron",
        prefer_canvas=False,
    )

    if bike_lanes:
        add_bike_lanes(m, bike_lanes)

    if domain_max is None:
        domain_max = max_total_traffic(traffic)

    scale = RadiusScale.for_filter(domain_max, time_filter)
    marker_names = add_station_markers(m, traffic, scale)

    m.get_root().html.add_child(build_legend_widget())
    m.get_root().html.add_child(build_time_slider(time_filter, marker_names))

    title_js = ""
    if title:
        title_literal = json.dumps(title).replace("</", "<\\/")
        title_js = (
            "const t=document.createElement('div');t.id='map-title';"
            f"t.textContent={title_literal};wrap.appendChild(t);"
        )

    m.get_root().html.add_child(
        folium.Element(
            f"""
<style>
#map-wrap {{
  position: relative;
  width: 100%;
}}
#map-wrap .leaflet-container {{
  width: 100% !important;
  height: 90vh !important;
  min-height: 520px;
}}
#map-title {{
  position: absolute;
  top: 12px;
  left: 50%;
  transform: translateX(-50%);
  background: rgba(255,255,255,0.95);
  padding: 6px 16px;
  border-radius: 999px;
  font-size: 14px;
  font-weight: 600;
  z-index: 1300;
}}
</style>

<script>
document.addEventListener("DOMContentLoaded", () => {{
  const mapEl = document.querySelector(".leaflet-container");
  if (!mapEl) return;

  let wrap = document.getElementById("map-wrap");
  if (!wrap) {{
    wrap = document.createElement("div");
    wrap.id = "map-wrap";
    mapEl.parentNode.insertBefore(wrap, mapEl);
    wrap.appendChild(mapEl);
  }}

  const existingTitle = document.getElementById("map-title");
  if (existingTitle) existingTitle.remove();

  {title_js}
}});
</script>
"""
        )
    )

    return m.get_root().render()
