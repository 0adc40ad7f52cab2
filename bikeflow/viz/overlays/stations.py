# bikeflow/viz/overlays/stations.py
from html import escape

import folium

from bikeflow.traffic.scales import (
    RadiusScale,
    flow_color,
    flow_ratio,
    quantize_flow,
    traffic_label,
)

FILL_OPACITY = 0.6
STROKE_COLOR = "white"
STROKE_WIDTH = 1


def station_tooltip(st) -> str:
    label = traffic_label(st)
    if st.name:
        # feed names contain "&" and friends
        label = f"<b>{escape(st.name)}</b><br>{label}"
    return label


def add_station_markers(m, traffic, radius: RadiusScale, time_filter: int):
    """
    One circle per station:
      - radius ~ sqrt(total traffic), domain fixed across filters
      - color = quantized departure share (departures vs arrivals)
      - tooltip = trip counts
    """
    radii = radius.radii([st.total_traffic for st in traffic], time_filter)

    for st, r in zip(traffic, radii):
        flow = quantize_flow(flow_ratio(st.departures, st.total_traffic))

        folium.CircleMarker(
            location=[st.lat, st.lon],
            radius=float(r),
            fill=True,
            fill_color=flow_color(flow),
            fill_opacity=FILL_OPACITY,
            color=STROKE_COLOR,
            weight=STROKE_WIDTH,
            tooltip=station_tooltip(st),
        ).add_to(m)
