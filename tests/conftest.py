from datetime import datetime, timedelta

import pytest

from bikeflow.traffic.trip_store import TripStore
from bikeflow.traffic.types import Station

DAY = datetime(2024, 3, 1)


def _trip_row(start, end, started_at, ended_at):
    return {
        "start_station_id": start,
        "end_station_id": end,
        "started_at": started_at,
        "ended_at": ended_at,
    }


def _at_minute(minute: int, seconds: int = 0) -> datetime:
    return DAY + timedelta(minutes=minute, seconds=seconds)


@pytest.fixture
def trip_row():
    """Raw trip row builder: trip_row(start, end, started_at, ended_at)."""
    return _trip_row


@pytest.fixture
def at_minute():
    """Timestamp on a fixed day: at_minute(minute, seconds=0)."""
    return _at_minute


@pytest.fixture
def stations():
    return [
        Station(id="A", lon=0.0, lat=0.0, name="Alpha"),
        Station(id="B", lon=1.0, lat=1.0, name="Bravo"),
    ]


@pytest.fixture
def ab_store():
    # A -> B in the early morning, B -> A across midnight
    store = TripStore()
    store.ingest_rows([
        _trip_row("A", "B", "2024-03-01 00:05:00", "2024-03-01 00:10:00"),
        _trip_row("B", "A", "2024-03-01 23:58:00", "2024-03-02 00:02:00"),
    ])
    return store


@pytest.fixture(scope="module")
def minute_store():
    """One trip starting and ending in every minute of the day."""
    store = TripStore()
    store.ingest_rows(
        _trip_row("A", "B", _at_minute(m), _at_minute(m, seconds=30))
        for m in range(1440)
    )
    return store
