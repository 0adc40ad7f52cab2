# bikeflow/traffic/export.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd

from bikeflow.traffic.scales import flow_ratio, quantize_flow
from bikeflow.traffic.types import StationTraffic

COLUMNS = [
    "station_id",
    "name",
    "lon",
    "lat",
    "departures",
    "arrivals",
    "total_traffic",
    "flow_ratio",
    "flow",
]


def traffic_frame(traffic: Iterable[StationTraffic]) -> pd.DataFrame:
    """
    One row per station, in station order.
    """
    rows = []
    for st in traffic:
        ratio = flow_ratio(st.departures, st.total_traffic)
        rows.append({
            "station_id": st.id,
            "name": st.name,
            "lon": st.lon,
            "lat": st.lat,
            "departures": st.departures,
            "arrivals": st.arrivals,
            "total_traffic": st.total_traffic,
            "flow_ratio": ratio,
            "flow": quantize_flow(ratio),
        })
    return pd.DataFrame(rows, columns=COLUMNS)


def write_traffic_csv(traffic: Iterable[StationTraffic], out_csv: str | Path) -> Path:
    out_csv = Path(out_csv)
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    traffic_frame(traffic).to_csv(out_csv, index=False)
    return out_csv
