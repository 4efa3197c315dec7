# bluetraffic/viz/widgets/legend.py
import folium

from bluetraffic.viz.overlays.stations import (
    ARRIVALS_COLOR,
    BALANCED_COLOR,
    DEPARTURES_COLOR,
)


def build_legend_widget():
    """
    Returns a Folium Element that injects a floating flow legend.
    """
    return folium.Element(
        f"""
<style>
#map-legend {{
  position: absolute;
  bottom: 24px;
  left: 16px;
  background: rgba(255,255,255,0.95);
  padding: 8px 12px;
  border-radius: 10px;
  font-size: 12px;
  z-index: 1200;
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
    wrap.style.position = "relative";
    wrap.style.width = "100%";
    mapEl.parentNode.insertBefore(wrap, mapEl);
    wrap.appendChild(mapEl);
  }}

  const existing = document.getElementById("map-legend");
  if (existing) existing.remove();

  const legend = document.createElement("div");
  legend.id = "map-legend";
  legend.innerHTML = `
    <div><b>Legend</b></div>
    <div><span style="color:{DEPARTURES_COLOR}">●</span> more departures</div>
    <div><span style="color:{BALANCED_COLOR}">●</span> balanced</div>
    <div><span style="color:{ARRIVALS_COLOR}">●</span> more arrivals</div>
  `;
  wrap.appendChild(legend);
}});
</script>
"""
    )
