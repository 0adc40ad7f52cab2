# bikeflow/traffic/types.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from bikeflow.traffic.time_filter import minutes_since_midnight


@dataclass(frozen=True)
class Trip:
    start_station_id: str
    end_station_id: str
    started_at: datetime
    ended_at: datetime

    @property
    def start_minute(self) -> int:
        return minutes_since_midnight(self.started_at)

    @property
    def end_minute(self) -> int:
        return minutes_since_midnight(self.ended_at)


@dataclass(frozen=True)
class Station:
    id: str
    lon: float
    lat: float
    name: str | None = None


@dataclass(frozen=True)
class StationTraffic:
    """
    Per-query overlay over a canonical Station.
    The station itself is shared and never written to.
    """
    station: Station
    departures: int = 0
    arrivals: int = 0

    @property
    def id(self) -> str:
        return self.station.id

    @property
    def lon(self) -> float:
        return self.station.lon

    @property
    def lat(self) -> float:
        return self.station.lat

    @property
    def name(self) -> str | None:
        return self.station.name

    @property
    def total_traffic(self) -> int:
        return self.departures + self.arrivals

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "lon": self.lon,
            "lat": self.lat,
            "departures": self.departures,
            "arrivals": self.arrivals,
            "total_traffic": self.total_traffic,
        }
