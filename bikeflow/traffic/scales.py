# bikeflow/traffic/scales.py
from __future__ import annotations

from bisect import bisect_right
from typing import Sequence, Tuple

import numpy as np

from bikeflow.traffic.time_filter import is_filtered

# marker radius in px
UNFILTERED_RANGE: Tuple[float, float] = (0.0, 25.0)
# filtered totals are much smaller, bump them so they stay visible
FILTERED_RANGE: Tuple[float, float] = (3.0, 50.0)

NEUTRAL_FLOW = 0.5
FLOW_LEVELS = (0.0, 0.5, 1.0)

DEPARTURE_COLOR = "#4682b4"  # steelblue
ARRIVAL_COLOR = "#ff8c00"  # darkorange


def radius_range(time_filter: int) -> Tuple[float, float]:
    return FILTERED_RANGE if is_filtered(time_filter) else UNFILTERED_RANGE


def radius_scale(total_traffic: float, domain_max: float, out_range: Tuple[float, float]) -> float:
    """
    Square-root scale: marker area grows linearly with traffic.
    An empty domain (no traffic at all) maps everything to the range minimum.
    """
    lo, hi = out_range
    if domain_max <= 0:
        return float(lo)
    return float(lo + np.sqrt(total_traffic / domain_max) * (hi - lo))


class RadiusScale:
    """
    Domain is fixed once from the unfiltered traffic so radii stay comparable
    while the slider moves; only the output range follows the filter.
    """

    def __init__(self, domain_max: float):
        self.domain_max = float(domain_max)

    def __call__(self, total_traffic: float, time_filter: int) -> float:
        return radius_scale(total_traffic, self.domain_max, radius_range(time_filter))

    def radii(self, totals: Sequence[float], time_filter: int) -> np.ndarray:
        lo, hi = radius_range(time_filter)
        totals = np.asarray(totals, dtype=np.float64)
        if self.domain_max <= 0:
            return np.full(totals.shape, lo, dtype=np.float64)
        return lo + np.sqrt(totals / self.domain_max) * (hi - lo)


def flow_ratio(departures: int, total_traffic: int) -> float:
    if total_traffic > 0:
        return departures / total_traffic
    return NEUTRAL_FLOW


def quantize_flow(ratio: float) -> float:
    """
    Three even buckets over [0, 1]: arrival-heavy, balanced, departure-heavy.
    Values on a threshold go to the upper bucket.
    """
    n = len(FLOW_LEVELS)
    thresholds = [i / n for i in range(1, n)]
    return FLOW_LEVELS[bisect_right(thresholds, ratio)]


def _hex_to_rgb(color: str) -> np.ndarray:
    color = color.lstrip("#")
    return np.array([int(color[i:i + 2], 16) for i in (0, 2, 4)], dtype=np.float64)


def flow_color(flow: float) -> str:
    """
    1 -> departure color, 0 -> arrival color, in between a straight RGB mix.
    """
    flow = min(1.0, max(0.0, float(flow)))
    rgb = flow * _hex_to_rgb(DEPARTURE_COLOR) + (1.0 - flow) * _hex_to_rgb(ARRIVAL_COLOR)
    r, g, b = (int(round(c)) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def traffic_label(st) -> str:
    return f"{st.total_traffic} trips ({st.departures} departures, {st.arrivals} arrivals)"
