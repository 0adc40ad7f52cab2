# bikeflow/viz/overlays/bike_lanes.py
from __future__ import annotations

from typing import Dict

from branca.element import MacroElement
from jinja2 import Template

BIKE_LANE_SOURCES = {
    "boston": "https://bostonopendata-boston.opendata.arcgis.com/datasets/boston::existing-bike-network-2022.geojson",
    "cambridge": "https://data.cambridgema.gov/api/geospatial/bike-facilities?method=export&format=GeoJSON",
}

BIKE_LANE_STYLE = {
    "color": "#32D400",
    "weight": 5,
    "opacity": 0.6,
}


class BikeLanes(MacroElement):
    """
    GeoJSON line layer the browser downloads itself.
    Only the URL goes into the page, the lane geometry never passes
    through the server.
    """

    _template = Template(
        """
{% macro script(this, kwargs) %}
fetch({{ this.url|tojson }})
  .then((r) => r.json())
  .then((data) => {
    L.geoJSON(data, {
      style: () => ({{ this.style|tojson }}),
    }).addTo({{ this._parent.get_name() }});
  })
  .catch((err) => console.error("Bike lanes " + {{ this.lane_name|tojson }} + " unavailable:", err));
{% endmacro %}
"""
    )

    def __init__(self, url: str, *, name: str = "bike lanes", style: Dict | None = None):
        super().__init__()
        self._name = "BikeLanes"
        self.url = url
        self.lane_name = name
        self.style = dict(style or BIKE_LANE_STYLE)


def add_bike_lanes(m, sources: Dict[str, str] = BIKE_LANE_SOURCES):
    # lanes draw first so station markers stay on top
    for name, url in sources.items():
        BikeLanes(url, name=name).add_to(m)
