# bluetraffic/viz/widgets/time_slider.py
import json

import folium

from bluetraffic.traffic.time_codec import ANY_TIME, ANY_TIME_LABEL, format_time


def build_time_slider(time_filter: int, marker_names=None):
    """
    Range input over [-1, 1439]. -1 means "any time".

    While dragging only the label changes. Releasing the handle fetches
    traffic.json?t=<minute> and restyles the circles in place, so the map
    keeps its pan and zoom. If the fetch fails the page reloads with ?t=.

    marker_names: dict[short_name] -> JS variable of the station circle
    """
    markers_js = json.dumps(marker_names or {}).replace("</", "<\\/")
    selected = "" if time_filter == ANY_TIME else format_time(time_filter)
    any_display = "block" if time_filter == ANY_TIME else "none"

    return folium.Element(
        f"""
<style>
#time-filter {{
  position: absolute;
  top: 12px;
  right: 16px;
  z-index: 1300;
  background: rgba(255,255,255,0.95);
  padding: 8px 14px;
  border-radius: 10px;
  font-size: 13px;
  box-shadow: 0 1px 4px rgba(0,0,0,0.2);
}}

#time-filter label {{
  display: flex;
  gap: 8px;
  align-items: baseline;
}}

#time-slider {{
  width: 260px;
}}

#selected-time, #any-time {{
  display: block;
  text-align: right;
  min-height: 1.2em;
}}

#any-time {{
  color: #888;
  font-style: italic;
}}
</style>

<div id="time-filter">
  <label>
    Filter by time:
    <input id="time-slider" type="range" min="{ANY_TIME}" max="1439" value="{time_filter}">
  </label>
  <time id="selected-time">{selected}</time>
  <em id="any-time" style="display:{any_display};">{ANY_TIME_LABEL}</em>
</div>

<script>
function formatTime(minutes) {{
  const h = Math.floor(minutes / 60);
  const m = minutes % 60;
  const suffix = h < 12 ? "AM" : "PM";
  const h12 = (h % 12) || 12;
  return h12 + ":" + String(m).padStart(2, "0") + " " + suffix;
}}

function updateTimeDisplay() {{
  const slider = document.getElementById("time-slider");
  const selected = document.getElementById("selected-time");
  const anyTime = document.getElementById("any-time");
  const t = Number(slider.value);

  if (t === {ANY_TIME}) {{
    selected.textContent = "";
    anyTime.style.display = "block";
  }} else {{
    selected.textContent = formatTime(t);
    anyTime.style.display = "none";
  }}
}}

const STATION_MARKERS = {markers_js};
let timeRequest = 0;

function reloadWithTime(t) {{
  const url = new URL(window.location.href);
  url.searchParams.set("t", String(t));
  window.location.href = url.toString();
}}

async function setTime(t) {{
  const requestId = ++timeRequest;
  const url = new URL("traffic.json", window.location.href);
  url.searchParams.set("t", String(t));

  let data;
  try {{
    const resp = await fetch(url);
    if (!resp.ok) throw new Error("HTTP " + resp.status);
    data = await resp.json();
  }} catch (e) {{
    reloadWithTime(t);
    return;
  }}

  // the slider moved again while we were waiting
  if (requestId !== timeRequest) return;

  data.stations.forEach((s) => {{
    const marker = window[STATION_MARKERS[s.short_name]];
    if (!marker) return;
    marker.setRadius(s.radius);
    marker.setStyle({{ fillColor: s.fill_color }});
    marker.setTooltipContent(s.tooltip);
  }});

  const page = new URL(window.location.href);
  page.searchParams.set("t", String(t));
  window.history.replaceState(null, "", page.toString());
}}

document.addEventListener("DOMContentLoaded", () => {{
  const slider = document.getElementById("time-slider");
  if (!slider) return;

  slider.addEventListener("input", updateTimeDisplay);
  slider.addEventListener("change", () => setTime(Number(slider.value)));

  // keep it on top of the map
  const wrap = document.getElementById("map-wrap");
  const box = document.getElementById("time-filter");
  if (wrap && box) wrap.appendChild(box);
}});
</script>
"""
    )
