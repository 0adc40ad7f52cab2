# bikeflow/traffic/aggregator.py
from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from bikeflow.traffic.time_filter import NO_FILTER
from bikeflow.traffic.trip_store import TripStore
from bikeflow.traffic.types import Station, StationTraffic, Trip


def _count_by(trips: Iterable[Trip], attr: str) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for trip in trips:
        sid = getattr(trip, attr)
        counts[sid] = counts.get(sid, 0) + 1
    return counts


def compute_station_traffic(
    store: TripStore,
    stations: Sequence[Station],
    time_filter: int = NO_FILTER,
) -> List[StationTraffic]:
    """
    Departures/arrivals per station inside the time window.

    Every station in `stations` shows up in the output, in the same order,
    with zero counts when nothing matched. Trips pointing at ids that are
    not in `stations` are simply not counted.
    """
    departures = _count_by(store.departures(time_filter), "start_station_id")
    arrivals = _count_by(store.arrivals(time_filter), "end_station_id")

    return [
        StationTraffic(
            station=s,
            departures=departures.get(s.id, 0),
            arrivals=arrivals.get(s.id, 0),
        )
        for s in stations
    ]


def max_total_traffic(traffic: Iterable[StationTraffic]) -> int:
    return max((st.total_traffic for st in traffic), default=0)
