from bluetraffic.config import Settings
from bluetraffic.traffic.dataset import TrafficDataset
from bluetraffic.viz.app.single import serve_traffic_map
from bluetraffic.viz.overlays.bike_lanes import load_bike_lanes


def main():
  settings = Settings.from_env()

  dataset = TrafficDataset.load(
      settings.stations_source,
      settings.trips_source,
      use_minute_index=settings.use_minute_index,
  )
  bike_lanes = load_bike_lanes() if settings.show_bike_lanes else None

  serve_traffic_map(
      dataset=dataset,
      host="0.0.0.0",  # IMPORTANT for Render
      port=settings.port,
      title=settings.title,
      bike_lanes=bike_lanes,
  )


if __name__ == "__main__":
  main()
