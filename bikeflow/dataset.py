# bikeflow/dataset.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from colorama import Fore, Style

from bikeflow.errors import DataLoadError
from bikeflow.traffic.aggregator import compute_station_traffic, max_total_traffic
from bikeflow.traffic.scales import RadiusScale
from bikeflow.traffic.time_filter import NO_FILTER
from bikeflow.traffic.trip_store import ON_MALFORMED_SKIP, TripStore
from bikeflow.traffic.types import Station, StationTraffic
from bikeflow.util.sources import load_trip_rows
from bikeflow.util.stations import load_stations

DEFAULT_STATIONS_SOURCE = "https://dsc106.com/labs/lab07/data/bluebikes-stations.json"
DEFAULT_TRIPS_SOURCE = "https://dsc106.com/labs/lab07/data/bluebikes-traffic-2024-03.csv"


@dataclass
class TrafficDataset:
    """
    Everything the viewer needs, built once at startup:
      - stations: canonical station list (never modified)
      - store: trips bucketed by minute
      - radius: scale with its domain fixed from unfiltered traffic
    """
    stations: List[Station]
    store: TripStore
    radius: RadiusScale

    def traffic(self, time_filter: int = NO_FILTER) -> List[StationTraffic]:
        return compute_station_traffic(self.store, self.stations, time_filter)


def build_dataset(stations: List[Station], store: TripStore) -> TrafficDataset:
    unfiltered = compute_station_traffic(store, stations, NO_FILTER)
    return TrafficDataset(
        stations=stations,
        store=store,
        radius=RadiusScale(max_total_traffic(unfiltered)),
    )


def load_dataset(
    *,
    stations_source: str | Path = DEFAULT_STATIONS_SOURCE,
    trips_source: str | Path = DEFAULT_TRIPS_SOURCE,
    on_malformed: str = ON_MALFORMED_SKIP,
    progress: bool = True,
) -> TrafficDataset:
    """
    Load stations + trips and bucket the trips.
    Raises DataLoadError if either source is unusable, ValueError for an
    unknown on_malformed policy (before anything is downloaded).
    """
    store = TripStore(on_malformed=on_malformed)

    print(f"{Fore.CYAN}Loading stations from {stations_source}…{Style.RESET_ALL}")
    stations = load_stations(stations_source)
    if not stations:
        raise DataLoadError(f"{stations_source}: no usable stations")
    print(f"{Fore.CYAN}Loaded {len(stations)} stations{Style.RESET_ALL}")

    print(f"{Fore.CYAN}Loading trips from {trips_source}…{Style.RESET_ALL}")
    rows = load_trip_rows(trips_source)

    store.ingest_rows(rows, total=len(rows), progress=progress)
    print(f"{Fore.CYAN}Bucketed {store.trip_count} trips{Style.RESET_ALL}")

    dataset = build_dataset(stations, store)
    print(f"{Fore.GREEN}Traffic dataset ready (max station traffic {dataset.radius.domain_max:.0f}).{Style.RESET_ALL}")
    return dataset
