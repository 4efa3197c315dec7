# bluetraffic/viz/app/single.py
from __future__ import annotations

from flask import Flask, jsonify, request

from bluetraffic.traffic.aggregate import max_total_traffic
from bluetraffic.traffic.time_codec import (
    ANY_TIME,
    format_time_filter,
    validate_time_filter,
)
from bluetraffic.viz.maps.error import render_load_error
from bluetraffic.viz.maps.render import render_map_document
from bluetraffic.viz.overlays.stations import marker_style
from bluetraffic.viz.scale import RadiusScale


def resolve_time_filter(raw) -> int:
    """
    ?t= query value -> time filter. Anything unusable means "any time".
    """
    if raw is None:
        return ANY_TIME
    try:
        return validate_time_filter(raw)
    except ValueError:
        return ANY_TIME


def create_app(dataset, *, title: str | None = None, bike_lanes=None) -> Flask:
    """
    dataset: TrafficDataset, loaded once before the app starts.
    bike_lanes: output of load_bike_lanes(), drawn on every page.
    """
    app = Flask(__name__)

    # radius domain is fixed by the all-day traffic; only the range
    # changes with the time filter
    domain_max = max_total_traffic(dataset.traffic_at(ANY_TIME)) if dataset.ok else 0

    @app.route("/")
    def _index():
        if not dataset.ok:
            return render_load_error(dataset.load_error, title=title), 503

        t_cur = resolve_time_filter(request.args.get("t"))

        return render_map_document(
            traffic=dataset.traffic_at(t_cur),
            time_filter=t_cur,
            domain_max=domain_max,
            title=title,
            bike_lanes=bike_lanes,
        )

    @app.route("/traffic.json")
    def _traffic():
        if not dataset.ok:
            return jsonify({"error": dataset.load_error}), 503

        t_cur = resolve_time_filter(request.args.get("t"))
        traffic = dataset.traffic_at(t_cur)
        scale = RadiusScale.for_filter(domain_max, t_cur)

        return jsonify({
            "time_filter": t_cur,
            "label": format_time_filter(t_cur),
            "domain_max": domain_max,
            "max_total_traffic": max_total_traffic(traffic),
            "stations": [
                {
                    "short_name": st.short_name,
                    "name": st.name,
                    "lat": st.lat,
                    "lon": st.lon,
                    "departures": st.departures,
                    "arrivals": st.arrivals,
                    "total_traffic": st.total_traffic,
                    "departure_ratio": st.departure_ratio,
                    **marker_style(st, scale),
                }
                for st in traffic.values()
            ],
        })

    return app


def serve_traffic_map(
    *,
    dataset,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
    title: str | None = None,
    bike_lanes=None,
):
    app = create_app(dataset, title=title, bike_lanes=bike_lanes)
    app.run(host=host, port=int(port), debug=bool(debug))
