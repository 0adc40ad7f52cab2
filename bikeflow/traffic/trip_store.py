# bikeflow/traffic/trip_store.py
from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Mapping

from colorama import Fore, Style
from tqdm import tqdm

from bikeflow.errors import MalformedTripError
from bikeflow.traffic.time_filter import (
    MINUTES_PER_DAY,
    NO_FILTER,
    validate_time_filter,
    window_bounds,
)
from bikeflow.traffic.types import Trip

# Bluebikes monthly export uses ISO timestamps ("2024-03-01 00:00:37.350"),
# other operators use the short US format.
TIME_FMT = "%m/%d/%Y %H:%M"

ON_MALFORMED_SKIP = "skip"
ON_MALFORMED_RAISE = "raise"
MALFORMED_POLICIES = (ON_MALFORMED_SKIP, ON_MALFORMED_RAISE)


def parse_timestamp(value) -> datetime:
    if isinstance(value, datetime):
        return value
    s = str(value or "").strip()
    if not s:
        raise ValueError("empty timestamp")
    try:
        return datetime.fromisoformat(s)
    except ValueError:
        return datetime.strptime(s, TIME_FMT)


def parse_trip(row: Mapping) -> Trip:
    """
    Turn one raw trip row into a Trip.
    Raises MalformedTripError, never a bare ValueError/KeyError.
    """
    s0 = str(row.get("start_station_id") or "").strip()
    s1 = str(row.get("end_station_id") or "").strip()
    if not s0 or not s1:
        raise MalformedTripError("trip row is missing a station id", row=row)

    try:
        started_at = parse_timestamp(row.get("started_at"))
        ended_at = parse_timestamp(row.get("ended_at"))
    except ValueError as e:
        raise MalformedTripError(f"bad trip timestamp: {e}", row=row) from e

    return Trip(
        start_station_id=s0,
        end_station_id=s1,
        started_at=started_at,
        ended_at=ended_at,
    )


def filter_by_minute(trips_by_minute: List[List[Trip]], time_filter: int) -> List[Trip]:
    """
    Trips from the minute slots inside the ±60 minute window.

    NO_FILTER returns every slot in slot order. Otherwise slots [lo, hi)
    are taken, going round past minute 1439 when the window wraps.
    The slot lists are only read, a new list is always returned.
    """
    time_filter = validate_time_filter(time_filter)

    if time_filter == NO_FILTER:
        slots = trips_by_minute
    else:
        lo, hi = window_bounds(time_filter)
        if lo > hi:
            slots = trips_by_minute[lo:] + trips_by_minute[:hi]
        else:
            slots = trips_by_minute[lo:hi]

    return [trip for slot in slots for trip in slot]


class TripStore:
    """
    Trips bucketed by minute of day, once by start time and once by end time.

    Filled once while loading, only queried afterwards.
    """

    def __init__(self, *, on_malformed: str = ON_MALFORMED_SKIP):
        if on_malformed not in MALFORMED_POLICIES:
            raise ValueError(
                f"on_malformed must be one of {MALFORMED_POLICIES}, got {on_malformed!r}"
            )
        self.on_malformed = on_malformed
        self.departures_by_minute: List[List[Trip]] = [[] for _ in range(MINUTES_PER_DAY)]
        self.arrivals_by_minute: List[List[Trip]] = [[] for _ in range(MINUTES_PER_DAY)]
        self.trip_count = 0
        self.skipped_count = 0

    def __len__(self) -> int:
        return self.trip_count

    def ingest(self, row: Mapping) -> Trip:
        # parse fully before touching any bucket
        trip = parse_trip(row)
        self.departures_by_minute[trip.start_minute].append(trip)
        self.arrivals_by_minute[trip.end_minute].append(trip)
        self.trip_count += 1
        return trip

    def ingest_rows(self, rows: Iterable[Mapping], *, total: int | None = None, progress: bool = False) -> int:
        """
        Ingest a batch of raw rows. Returns how many trips were added.

        With on_malformed="skip" bad rows are counted and dropped,
        with "raise" the first bad row aborts the batch.
        """
        it = rows
        if progress:
            it = tqdm(rows, total=total, desc="Bucketing trips")

        added = 0
        for row in it:
            try:
                self.ingest(row)
            except MalformedTripError:
                if self.on_malformed == ON_MALFORMED_RAISE:
                    raise
                self.skipped_count += 1
                continue
            added += 1

        if self.skipped_count:
            print(f"{Fore.YELLOW}Skipped {self.skipped_count} malformed trip rows{Style.RESET_ALL}")

        return added

    def query_window(self, trips_by_minute: List[List[Trip]], time_filter: int = NO_FILTER) -> List[Trip]:
        return filter_by_minute(trips_by_minute, time_filter)

    def departures(self, time_filter: int = NO_FILTER) -> List[Trip]:
        return filter_by_minute(self.departures_by_minute, time_filter)

    def arrivals(self, time_filter: int = NO_FILTER) -> List[Trip]:
        return filter_by_minute(self.arrivals_by_minute, time_filter)
