"""Unit tests for geo aggregations."""

from __future__ import annotations

from dataclasses import replace

import pytest

from core.types import AirportRecord, GeoPoint, RouteRecord
from store.geo_aggregation import airport_geo_points, route_geo_segments
from store.route_database import RouteDatabase


def _airport(airport_id: int, latitude: float, longitude: float) -> AirportRecord:
    return AirportRecord(
        airport_id=airport_id,
        name=f"Airport {airport_id}",
        city="City",
        country="Country",
        iata="",
        icao="",
        latitude=latitude,
        longitude=longitude,
        altitude=0.0,
        timezone=0.0,
        dst="U",
    )


def _route(source: AirportRecord, destination: AirportRecord) -> RouteRecord:
    return RouteRecord(
        airline="AB",
        airline_id=10,
        source_airport="",
        source_airport_id=source.airport_id,
        dest_airport="",
        dest_airport_id=destination.airport_id,
        codeshare=False,
        stops=0,
        equipment="",
        source=source,
        destination=destination,
    )


def test_airport_geo_points_flip_latitude_and_bias_weight(fixture_database: RouteDatabase) -> None:
    """Points use (lon, -lat, degree + 1) in ingestion order."""
    points = fixture_database.airport_geo_points()

    assert [point.weight for point in points] == [5, 4, 2, 1]
    assert points[0].longitude == pytest.approx(-73.778925)
    assert points[0].latitude == pytest.approx(-40.639751)


def test_airport_geo_points_count_self_loop_once() -> None:
    """A route touching the same airport twice adds one to its degree."""
    airport = replace(
        _airport(1, 10.0, 20.0), outbound_routes=frozenset({0}), inbound_routes=frozenset({0})
    )

    assert airport_geo_points([airport]) == [GeoPoint(20.0, -10.0, 2)]


def test_route_geo_segments_collapse_opposite_directions() -> None:
    """Opposite-direction routes between two points yield one segment."""
    first, second = _airport(1, 10.0, 20.0), _airport(2, 30.0, 40.0)

    routes = [_route(first, second), _route(second, first), _route(first, second)]

    segments = route_geo_segments(routes)

    assert segments == [(20.0, -10.0, 40.0, -30.0)]


def test_route_geo_segments_key_on_coordinates_not_ids() -> None:
    """Distinct airports at identical coordinates share one segment."""
    first, twin = _airport(1, 10.0, 20.0), _airport(3, 10.0, 20.0)
    other = _airport(2, 30.0, 40.0)

    segments = route_geo_segments([_route(first, other), _route(other, twin)])

    assert len(segments) == 1


def test_route_geo_segments_never_repeat_an_unordered_pair() -> None:
    """Interleaved routes from one hub still produce unique segments."""
    hub, east, west = _airport(1, 0.0, 0.0), _airport(2, 0.0, 10.0), _airport(3, 0.0, -10.0)
    routes = [_route(hub, east), _route(hub, west), _route(east, hub), _route(hub, east)]

    segments = route_geo_segments(routes)
    keys = [frozenset({(s[0], s[1]), (s[2], s[3])}) for s in segments]

    assert len(segments) == 2
    assert len(set(keys)) == len(keys)


def test_route_geo_segments_for_fixture(fixture_database: RouteDatabase) -> None:
    """Fixture routes JFK-DUS (three times) and LHR-JFK give two segments."""
    assert len(fixture_database.route_geo_segments()) == 2
