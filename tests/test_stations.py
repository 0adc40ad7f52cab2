import json

import pytest

from bikeflow.errors import DataLoadError
from bikeflow.traffic.types import Station
from bikeflow.util.sources import load_trip_rows
from bikeflow.util.stations import load_stations, normalize_station, normalize_stations


@pytest.mark.parametrize(
    "record",
    [
        {"short_name": "A32", "lon": -71.1, "lat": 42.3},
        {"short_name": "A32", "Long": "-71.1", "Lat": "42.3"},
        {"short_name": "A32", "long": -71.1, "Lat": 42.3},
        {"station_id": "A32", "lon": -71.1, "lat": 42.3},
    ],
)
def test_coordinate_spellings_normalize_to_one_shape(record):
    s = normalize_station(record)
    assert s == Station(id="A32", lon=-71.1, lat=42.3)


def test_zero_coordinate_is_kept():
    s = normalize_station({"short_name": "Z", "lon": 0, "lat": 0.0})
    assert (s.lon, s.lat) == (0.0, 0.0)


@pytest.mark.parametrize(
    "record",
    [
        {"lon": -71.1, "lat": 42.3},
        {"short_name": "A32", "lat": 42.3},
        {"short_name": "A32", "lon": "west", "lat": 42.3},
    ],
)
def test_unusable_records_are_dropped(record):
    assert normalize_station(record) is None


def test_normalize_stations_skips_bad_records_and_keeps_order():
    stations = normalize_stations([
        {"short_name": "B", "lon": 1, "lat": 1, "name": "Bravo"},
        {"name": "no id"},
        "not a record",
        {"short_name": "A", "Long": 0, "Lat": 0},
    ])
    assert [s.id for s in stations] == ["B", "A"]
    assert stations[0].name == "Bravo"


def test_load_stations_from_gbfs_file(tmp_path):
    path = tmp_path / "stations.json"
    path.write_text(json.dumps({
        "data": {"stations": [{"short_name": "A", "lon": 0.5, "lat": 1.5, "name": "Alpha"}]}
    }))
    assert load_stations(path) == [Station(id="A", lon=0.5, lat=1.5, name="Alpha")]


def test_load_stations_missing_file(tmp_path):
    with pytest.raises(DataLoadError):
        load_stations(tmp_path / "missing.json")


def test_load_stations_bad_json(tmp_path):
    path = tmp_path / "stations.json"
    path.write_text("{not json")
    with pytest.raises(DataLoadError):
        load_stations(path)


def test_load_stations_wrong_shape(tmp_path):
    path = tmp_path / "stations.json"
    path.write_text(json.dumps({"data": {}}))
    with pytest.raises(DataLoadError):
        load_stations(path)


def test_load_trip_rows_reads_strings(tmp_path):
    path = tmp_path / "trips.csv"
    path.write_text(
        "ride_id,start_station_id,end_station_id,started_at,ended_at\n"
        "r1,A32,B01,2024-03-01 00:05:00,2024-03-01 00:10:00\n"
        "r2,007,,2024-03-01 00:06:00,\n"
    )
    rows = load_trip_rows(path)
    assert rows[0] == {
        "start_station_id": "A32",
        "end_station_id": "B01",
        "started_at": "2024-03-01 00:05:00",
        "ended_at": "2024-03-01 00:10:00",
    }
    assert rows[1]["start_station_id"] == "007"
    assert rows[1]["end_station_id"] == ""


def test_load_trip_rows_missing_columns(tmp_path):
    path = tmp_path / "trips.csv"
    path.write_text("Start Station Id,End Station Id\n1,2\n")
    with pytest.raises(DataLoadError):
        load_trip_rows(path)


def test_load_trip_rows_missing_file(tmp_path):
    with pytest.raises(DataLoadError):
        load_trip_rows(tmp_path / "missing.csv")
