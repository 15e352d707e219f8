"""Read-only route database and its query API.

A built database owns the airports, airlines and routes collections
and their indices. Nothing is mutated after construction, so a single
instance can be shared by concurrent readers.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from core.errors import UnknownAirportError
from core.types import (
    AirlineRecord,
    AirportRecord,
    GeoPoint,
    GeoSegment,
    IngestDiagnostic,
    RouteRecord,
)
from store.geo_aggregation import airport_geo_points, route_geo_segments


class RouteDatabase:
    """Immutable in-memory graph of airports, airlines and routes."""

    def __init__(
        self,
        *,
        airports: tuple[AirportRecord, ...],
        airports_by_id: Mapping[int, AirportRecord],
        airports_by_iata: Mapping[str, AirportRecord],
        airports_by_icao: Mapping[str, AirportRecord],
        airlines: tuple[AirlineRecord, ...],
        airlines_by_id: Mapping[int, AirlineRecord],
        routes: tuple[RouteRecord, ...],
        diagnostics: tuple[IngestDiagnostic, ...] = (),
    ) -> None:
        self._airports = airports
        self._airports_by_id = MappingProxyType(dict(airports_by_id))
        self._airports_by_iata = MappingProxyType(dict(airports_by_iata))
        self._airports_by_icao = MappingProxyType(dict(airports_by_icao))
        self._airlines = airlines
        self._airlines_by_id = MappingProxyType(dict(airlines_by_id))
        self._routes = routes
        self._diagnostics = diagnostics

    @property
    def airports(self) -> tuple[AirportRecord, ...]:
        """Airports in ingestion order."""
        return self._airports

    @property
    def airlines(self) -> tuple[AirlineRecord, ...]:
        """Airlines in ingestion order."""
        return self._airlines

    @property
    def routes(self) -> tuple[RouteRecord, ...]:
        """Retained routes in ingestion order; positions are route handles."""
        return self._routes

    @property
    def airports_by_id(self) -> Mapping[int, AirportRecord]:
        return self._airports_by_id

    @property
    def airports_by_iata(self) -> Mapping[str, AirportRecord]:
        return self._airports_by_iata

    @property
    def airports_by_icao(self) -> Mapping[str, AirportRecord]:
        return self._airports_by_icao

    @property
    def airlines_by_id(self) -> Mapping[int, AirlineRecord]:
        return self._airlines_by_id

    @property
    def diagnostics(self) -> tuple[IngestDiagnostic, ...]:
        """Row and field problems recorded while building."""
        return self._diagnostics

    def lookup_airport(self, airport_id: int) -> AirportRecord | None:
        return self._airports_by_id.get(airport_id)

    def lookup_airport_by_iata(self, code: str) -> AirportRecord | None:
        return self._airports_by_iata.get(code)

    def lookup_airport_by_icao(self, code: str) -> AirportRecord | None:
        return self._airports_by_icao.get(code)

    def lookup_airline(self, airline_id: int) -> AirlineRecord | None:
        return self._airlines_by_id.get(airline_id)

    def routes_from(self, airport_id: int) -> list[RouteRecord]:
        """Return routes departing from an airport.

        Args:
            airport_id: Indexed airport id.

        Returns:
            Routes in ingestion order.

        Raises:
            UnknownAirportError: If the id is not indexed.
        """
        airport = self._require_airport(airport_id)
        return self._resolve_handles(airport.outbound_routes)

    def routes_to(self, airport_id: int) -> list[RouteRecord]:
        """Return routes arriving at an airport.

        Raises:
            UnknownAirportError: If the id is not indexed.
        """
        airport = self._require_airport(airport_id)
        return self._resolve_handles(airport.inbound_routes)

    def routes_by_airport(self, airport_id: int) -> list[RouteRecord]:
        """Return routes arriving at or departing from an airport.

        Each route appears once, including a route whose source and
        destination are the same airport.

        Raises:
            UnknownAirportError: If the id is not indexed.
        """
        airport = self._require_airport(airport_id)
        return self._resolve_handles(airport.outbound_routes | airport.inbound_routes)

    def airport_geo_points(self) -> list[GeoPoint]:
        """Return (longitude, -latitude, route count + 1) for every airport."""
        return airport_geo_points(self._airports)

    def route_geo_segments(self) -> list[GeoSegment]:
        """Return one segment per undirected coordinate pair."""
        return route_geo_segments(self._routes)

    def summary(self) -> dict[str, int]:
        """Return record and diagnostic counts."""
        return {
            "airport_count": len(self._airports),
            "airline_count": len(self._airlines),
            "route_count": len(self._routes),
            "diagnostic_count": len(self._diagnostics),
        }

    def _require_airport(self, airport_id: int) -> AirportRecord:
        airport = self._airports_by_id.get(airport_id)
        if airport is None:
            raise UnknownAirportError(airport_id)
        return airport

    def _resolve_handles(self, handles: Iterable[int]) -> list[RouteRecord]:
        return [self._routes[handle] for handle in sorted(handles)]
