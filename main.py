# main.py

from colorama import Fore, Style

from bluetraffic.config import Settings
from bluetraffic.traffic.dataset import TrafficDataset
from bluetraffic.traffic.export import write_hourly_traffic_csv
from bluetraffic.traffic.time_codec import ANY_TIME, format_time
from bluetraffic.viz.app.single import serve_traffic_map
from bluetraffic.viz.overlays.bike_lanes import load_bike_lanes

TOP_N = 10
PEAK_HOURS = [8 * 60, 17 * 60]


def print_busiest(dataset, time_filter=ANY_TIME, label="all day"):
    traffic = dataset.traffic_at(time_filter)
    busiest = sorted(traffic.values(), key=lambda st: st.total_traffic, reverse=True)

    print(f"\nBusiest stations ({label}):\n")
    for i, st in enumerate(busiest[:TOP_N], 1):
        print(
            f"{i:02d}. "
            f"{st.short_name:>8} | "
            f"{st.total_traffic:6d} trips "
            f"({st.departures} departures, {st.arrivals} arrivals) "
            f"{st.name}"
        )


def main():
    settings = Settings.from_env()

    dataset = TrafficDataset.load(
        settings.stations_source,
        settings.trips_source,
        use_minute_index=settings.use_minute_index,
    )

    if dataset.ok:
        print_busiest(dataset)
        for t in PEAK_HOURS:
            print_busiest(dataset, t, label=f"around {format_time(t)}")

        if settings.export_csv:
            out = write_hourly_traffic_csv(dataset, settings.export_csv)
            print(f"{Fore.GREEN}Wrote {out}{Style.RESET_ALL}")

    bike_lanes = load_bike_lanes() if settings.show_bike_lanes else None

    # ---- UI ----
    serve_traffic_map(
        dataset=dataset,
        host=settings.host,
        port=settings.port,
        title=settings.title,
        bike_lanes=bike_lanes,
    )


if __name__ == "__main__":
    main()
