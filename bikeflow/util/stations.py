# bikeflow/util/stations.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from colorama import Fore, Style

from bikeflow.traffic.types import Station
from bikeflow.util.sources import load_station_records

# station feeds disagree on key spelling, first hit wins
ID_KEYS = ("short_name", "station_id")
LON_KEYS = ("lon", "Long", "long")
LAT_KEYS = ("lat", "Lat")
NAME_KEYS = ("name", "NAME")


def _first(record: Dict[str, Any], keys: Tuple[str, ...]) -> Optional[Any]:
    for k in keys:
        v = record.get(k)
        if v is not None and v != "":
            return v
    return None


def normalize_station(record: Dict[str, Any]) -> Optional[Station]:
    """
    Map one raw record onto a Station, or None when it has no usable
    id or coordinates.
    """
    sid = _first(record, ID_KEYS)
    lon = _first(record, LON_KEYS)
    lat = _first(record, LAT_KEYS)
    if sid is None or lon is None or lat is None:
        return None

    try:
        lon = float(lon)
        lat = float(lat)
    except (TypeError, ValueError):
        return None

    name = _first(record, NAME_KEYS)
    return Station(
        id=str(sid).strip(),
        lon=lon,
        lat=lat,
        name=None if name is None else str(name),
    )


def normalize_stations(records: Iterable[Dict[str, Any]]) -> List[Station]:
    stations: List[Station] = []
    skipped = 0
    for r in records:
        s = normalize_station(r) if isinstance(r, dict) else None
        if s is None:
            skipped += 1
            continue
        stations.append(s)

    if skipped:
        print(f"{Fore.YELLOW}Skipped {skipped} station records without id/coordinates{Style.RESET_ALL}")

    return stations


def load_stations(source: str | Path) -> List[Station]:
    """
    Load stations from a station JSON URL or file.
    Returns the canonical, immutable station list in feed order.
    """
    return normalize_stations(load_station_records(source))
