# bikeflow/viz/app/single.py
from __future__ import annotations

from flask import Flask, jsonify, request

from bikeflow.dataset import TrafficDataset
from bikeflow.traffic.scales import flow_ratio, quantize_flow
from bikeflow.traffic.time_filter import coerce_time_filter, format_time, is_filtered
from bikeflow.viz.maps.render import render_map_document
from bikeflow.viz.overlays.bike_lanes import BIKE_LANE_SOURCES


def create_app(
    dataset: TrafficDataset,
    *,
    bike_lanes=BIKE_LANE_SOURCES,
    title: str = "Bikewatching",
) -> Flask:
    """
    Flask app over an already loaded dataset.

    Routes:
      /              map page, ?t=<minute of day> (-1 or missing = any time)
      /traffic.json  same traffic snapshot as JSON
    """
    if dataset is None:
        raise ValueError("create_app requires a loaded TrafficDataset")

    app = Flask(__name__)

    def _resolve_time() -> int:
        return coerce_time_filter(request.args.get("t"))

    @app.route("/")
    def _index():
        t_cur = _resolve_time()
        return render_map_document(
            traffic=dataset.traffic(t_cur),
            radius=dataset.radius,
            time_filter=t_cur,
            bike_lanes=bike_lanes,
            title=title,
        )

    @app.route("/traffic.json")
    def _traffic_json():
        t_cur = _resolve_time()
        traffic = dataset.traffic(t_cur)
        radii = dataset.radius.radii([st.total_traffic for st in traffic], t_cur)

        stations = []
        for st, r in zip(traffic, radii):
            row = st.as_dict()
            row["radius"] = round(float(r), 3)
            row["flow"] = quantize_flow(flow_ratio(st.departures, st.total_traffic))
            stations.append(row)

        return jsonify({
            "time_filter": t_cur,
            "time_label": format_time(t_cur) if is_filtered(t_cur) else "any time",
            "stations": stations,
        })

    return app


def serve_traffic_map(
    dataset: TrafficDataset,
    *,
    bike_lanes=BIKE_LANE_SOURCES,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
    title: str = "Bikewatching",
):
    """
    Library entrypoint: call this and you get a running website (blocking).
    """
    app = create_app(dataset, bike_lanes=bike_lanes, title=title)
    app.run(host=host, port=int(port), debug=bool(debug))
