# bikeflow/viz/maps/render.py
import folium

from bikeflow.traffic.time_filter import NO_FILTER
from bikeflow.viz.overlays.bike_lanes import BIKE_LANE_SOURCES, add_bike_lanes
from bikeflow.viz.overlays.stations import add_station_markers
from bikeflow.viz.widgets.legend import build_legend_widget
from bikeflow.viz.widgets.time_slider import build_time_slider

# Boston / Cambridge
CENTER_LAT = 42.36027
CENTER_LON = -71.09415


def render_map_document(
    *,
    traffic,
    radius,
    time_filter: int = NO_FILTER,
    bike_lanes=BIKE_LANE_SOURCES,
    title: str = "Bikewatching",
):
    """
    Single place that assembles the full Folium map HTML document.
    """

    m = folium.Map(
        location=[CENTER_LAT, CENTER_LON],
        zoom_start=12,
        min_zoom=5,
        max_zoom=18,
        tiles="cartodbpositron",
        prefer_canvas=True,
    )

    # lanes under the stations
    add_bike_lanes(m, bike_lanes)

    add_station_markers(m, traffic, radius, time_filter)

    m.get_root().html.add_child(build_time_slider(time_filter, title=title))
    m.get_root().html.add_child(build_legend_widget())

    m.get_root().html.add_child(
        folium.Element(
            """
<style>
html, body {
  height: 100%;
  width: 100%;
  margin: 0;
}
#map-wrap {
  position: relative;
  width: 100%;
}
#map-wrap .leaflet-container {
  width: 100% !important;
  height: 100vh !important;
  min-height: 520px;
}
</style>
"""
        )
    )

    return m.get_root().render()
