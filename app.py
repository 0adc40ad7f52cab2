import os
import sys

from colorama import Fore, Style

from bikeflow.dataset import DEFAULT_STATIONS_SOURCE, DEFAULT_TRIPS_SOURCE, load_dataset
from bikeflow.errors import DataLoadError
from bikeflow.traffic.trip_store import MALFORMED_POLICIES
from bikeflow.viz.app.single import serve_traffic_map

STATIONS = os.environ.get("STATIONS_SOURCE", DEFAULT_STATIONS_SOURCE)
TRIPS = os.environ.get("TRIPS_SOURCE", DEFAULT_TRIPS_SOURCE)
ON_MALFORMED = os.environ.get("ON_MALFORMED", "skip")


def main():
  if ON_MALFORMED not in MALFORMED_POLICIES:
    print(
        f"{Fore.RED}ON_MALFORMED must be one of {', '.join(MALFORMED_POLICIES)}, "
        f"got {ON_MALFORMED!r}{Style.RESET_ALL}"
    )
    sys.exit(2)

  try:
    dataset = load_dataset(
        stations_source=STATIONS,
        trips_source=TRIPS,
        on_malformed=ON_MALFORMED,
    )
  except DataLoadError as e:
    print(f"{Fore.RED}Error loading data: {e}{Style.RESET_ALL}")
    sys.exit(1)

  port = int(os.environ.get("PORT", "8080"))

  serve_traffic_map(
      dataset,
      host=os.environ.get("HOST", "0.0.0.0"),
      port=port,
      title="Bikewatching",
  )


if __name__ == "__main__":
  main()
