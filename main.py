# main.py

from bikeflow.dataset import load_dataset
from bikeflow.traffic.export import write_traffic_csv
from bikeflow.traffic.time_filter import NO_FILTER, format_time

from bikeflow.viz.app.single import serve_traffic_map


STATIONS = "bluebikes-stations.json"
TRIPS = "bluebikes-traffic-2024-03.csv"

# morning peak, evening peak, just after midnight
SNAPSHOT_TIMES = [NO_FILTER, 8 * 60, 17 * 60 + 30, 15]


def main():
    dataset = load_dataset(stations_source=STATIONS, trips_source=TRIPS)

    # ---- snapshots ----
    for t in SNAPSHOT_TIMES:
        traffic = dataset.traffic(t)
        label = "any time" if t == NO_FILTER else format_time(t)

        busiest = sorted(traffic, key=lambda st: st.total_traffic, reverse=True)[:5]
        print(f"\nBusiest stations ({label}):")
        for i, st in enumerate(busiest, 1):
            print(
                f"{i}. {st.id:>8} | "
                f"{st.total_traffic:6d} trips "
                f"({st.departures} out, {st.arrivals} in)"
            )

        suffix = "all" if t == NO_FILTER else f"{t:04d}"
        write_traffic_csv(traffic, f"station_traffic_{suffix}.csv")

    # ---- UI ----
    serve_traffic_map(dataset, port=8080)


if __name__ == "__main__":
    main()
