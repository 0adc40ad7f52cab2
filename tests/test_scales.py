import pytest

from bikeflow.traffic.scales import (
    ARRIVAL_COLOR,
    DEPARTURE_COLOR,
    FILTERED_RANGE,
    UNFILTERED_RANGE,
    RadiusScale,
    flow_color,
    flow_ratio,
    quantize_flow,
    radius_range,
    radius_scale,
    traffic_label,
)
from bikeflow.traffic.time_filter import (
    NO_FILTER,
    coerce_time_filter,
    format_time,
    window_bounds,
)
from bikeflow.traffic.types import Station, StationTraffic


def test_radius_scale_is_square_root():
    assert radius_scale(0, 100, (0, 25)) == 0
    assert radius_scale(100, 100, (0, 25)) == 25
    assert radius_scale(25, 100, (0, 25)) == pytest.approx(12.5)
    assert radius_scale(25, 100, (3, 50)) == pytest.approx(3 + 0.5 * 47)


def test_radius_scale_with_empty_domain():
    assert radius_scale(0, 0, (3, 50)) == 3


def test_radius_range_depends_on_filter():
    assert radius_range(NO_FILTER) == UNFILTERED_RANGE
    assert radius_range(0) == FILTERED_RANGE
    assert radius_range(1439) == FILTERED_RANGE


def test_radius_scale_keeps_its_domain_across_filters():
    scale = RadiusScale(400)
    assert scale(400, NO_FILTER) == 25
    assert scale(100, NO_FILTER) == pytest.approx(12.5)
    assert scale(100, 480) == pytest.approx(3 + 0.5 * 47)
    assert scale(0, 480) == 3


def test_vectorized_radii_match_scalar():
    scale = RadiusScale(90)
    totals = [0, 1, 10, 45, 90]
    for t_filter in (NO_FILTER, 600):
        radii = scale.radii(totals, t_filter)
        assert list(radii) == pytest.approx([scale(t, t_filter) for t in totals])


@pytest.mark.parametrize(
    ("departures", "total", "expected"),
    [(0, 0, 0.5), (3, 4, 0.75), (0, 5, 0.0), (5, 5, 1.0)],
)
def test_flow_ratio(departures, total, expected):
    assert flow_ratio(departures, total) == expected


@pytest.mark.parametrize(
    ("ratio", "expected"),
    [
        (0.0, 0.0),
        (0.2, 0.0),
        (1 / 3, 0.5),
        (0.5, 0.5),
        (0.66, 0.5),
        (2 / 3, 1.0),
        (1.0, 1.0),
    ],
)
def test_quantize_flow_uses_thirds(ratio, expected):
    assert quantize_flow(ratio) == expected


def test_flow_color_endpoints():
    assert flow_color(1.0) == DEPARTURE_COLOR
    assert flow_color(0.0) == ARRIVAL_COLOR
    assert flow_color(0.5) not in (DEPARTURE_COLOR, ARRIVAL_COLOR)


def test_traffic_label():
    st = StationTraffic(station=Station(id="A", lon=0, lat=0), departures=3, arrivals=4)
    assert traffic_label(st) == "7 trips (3 departures, 4 arrivals)"


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [(0, "12:00 AM"), (5, "12:05 AM"), (785, "1:05 PM"), (1439, "11:59 PM")],
)
def test_format_time(minutes, expected):
    assert format_time(minutes) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, NO_FILTER), ("abc", NO_FILTER), ("-1", NO_FILTER), ("-30", NO_FILTER),
     ("inf", NO_FILTER), ("-inf", NO_FILTER), ("1e400", NO_FILTER), ("nan", NO_FILTER),
     ("480", 480), ("480.7", 480), ("99999", 1439)],
)
def test_coerce_time_filter(raw, expected):
    assert coerce_time_filter(raw) == expected


@pytest.mark.parametrize(
    ("f", "bounds"),
    [(0, (1380, 60)), (30, (1410, 90)), (720, (660, 780)), (1400, (1340, 20))],
)
def test_window_bounds(f, bounds):
    lo, hi = window_bounds(f)
    assert (lo, hi) == bounds
    assert (hi - lo) % 1440 == 120
