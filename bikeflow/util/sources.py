# bikeflow/util/sources.py
from __future__ import annotations

import json
import urllib.request
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from bikeflow.errors import DataLoadError

HTTP_TIMEOUT_S = 30

TRIP_COLUMNS = ["start_station_id", "end_station_id", "started_at", "ended_at"]


def _is_url(source) -> bool:
    return str(source).startswith(("http://", "https://"))


def fetch_json(source: str | Path) -> Any:
    """
    Read a JSON document from a URL or a local file.
    """
    try:
        if _is_url(source):
            req = urllib.request.Request(str(source), headers={"User-Agent": "bikeflow/0.1"})
            with urllib.request.urlopen(req, timeout=HTTP_TIMEOUT_S) as r:
                return json.loads(r.read().decode("utf-8"))
        with open(source, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise DataLoadError(f"could not load JSON from {source}: {e}") from e


def load_station_records(source: str | Path) -> List[Dict[str, Any]]:
    """
    Raw station records, either GBFS style {"data": {"stations": [...]}}
    or a bare list.
    """
    raw = fetch_json(source)
    if isinstance(raw, dict):
        try:
            raw = raw["data"]["stations"]
        except (KeyError, TypeError) as e:
            raise DataLoadError(f"{source}: expected data.stations in station JSON") from e
    if not isinstance(raw, list):
        raise DataLoadError(f"{source}: station JSON is not a list of stations")
    return raw


def load_trip_rows(source: str | Path) -> List[Dict[str, str]]:
    """
    Trip CSV rows as plain dicts of strings.
    Timestamps are parsed later, row by row, so one bad value
    doesn't take the whole file down.
    """
    try:
        df = pd.read_csv(source, dtype=str, keep_default_na=False)
    except (OSError, ValueError) as e:
        raise DataLoadError(f"could not load trips CSV from {source}: {e}") from e

    df.columns = [c.strip() for c in df.columns]
    missing = [c for c in TRIP_COLUMNS if c not in df.columns]
    if missing:
        raise DataLoadError(f"{source}: trips CSV missing columns {missing}")

    return df[TRIP_COLUMNS].to_dict("records")
