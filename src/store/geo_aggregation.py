"""Geo aggregations over a linked route graph.

Coordinates are emitted as (longitude, -latitude), the south-positive
convention of the consuming map projection.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import GEO_WEIGHT_BIAS
from core.types import AirportRecord, GeoPoint, GeoSegment, RouteRecord


def airport_geo_points(airports: Iterable[AirportRecord]) -> list[GeoPoint]:
    """Return one weighted point per airport, in ingestion order.

    The weight is the number of distinct routes touching the airport
    plus one.

    Args:
        airports: Airports with back-references attached.

    Returns:
        Points as (longitude, -latitude, route degree + 1).
    """
    return [
        GeoPoint(
            longitude=airport.longitude,
            latitude=-airport.latitude,
            weight=route_degree(airport) + GEO_WEIGHT_BIAS,
        )
        for airport in airports
    ]


def route_geo_segments(routes: Iterable[RouteRecord]) -> list[GeoSegment]:
    """Return de-duplicated undirected route segments.

    Routes are keyed by their endpoint coordinates, not airport ids, so
    airports sharing exact coordinates collapse into one endpoint. The
    first route seen for an unordered coordinate pair emits the segment.

    Args:
        routes: Linked routes in ingestion order.

    Returns:
        Segments as (source lon, -source lat, dest lon, -dest lat).
    """
    segments: list[GeoSegment] = []
    seen: set[tuple[tuple[float, float], tuple[float, float]]] = set()
    for route in routes:
        if route.source is None or route.destination is None:
            continue
        start = (route.source.longitude, -route.source.latitude)
        end = (route.destination.longitude, -route.destination.latitude)
        if (start, end) in seen:
            continue
        seen.add((start, end))
        seen.add((end, start))
        segments.append(GeoSegment(start[0], start[1], end[0], end[1]))
    return segments


def route_degree(airport: AirportRecord) -> int:
    """Count distinct routes arriving at or departing from an airport."""
    return len(airport.outbound_routes | airport.inbound_routes)
