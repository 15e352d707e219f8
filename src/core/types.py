"""Shared typed models.

This module defines immutable data models used by the ingest pipeline,
the route database, the SDK and the CLI to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, NamedTuple

DatasetKind = Literal["airports", "airlines", "routes"]


@dataclass(frozen=True)
class AirportRecord:
    """Airport row from ``airports.dat``.

    Attributes:
        airport_id: Dataset-assigned primary key.
        name: Airport name.
        city: Main city served.
        country: Country name.
        iata: Three-letter IATA code, ``\\N`` or empty when unassigned.
        icao: Four-letter ICAO code, may be empty.
        latitude: Decimal degrees, north positive.
        longitude: Decimal degrees, east positive.
        altitude: Altitude in feet.
        timezone: Hours offset from UTC.
        dst: Daylight-saving-time code (single character).
        outbound_routes: Handles of routes departing from this airport.
        inbound_routes: Handles of routes arriving at this airport.
    """

    airport_id: int
    name: str
    city: str
    country: str
    iata: str
    icao: str
    latitude: float
    longitude: float
    altitude: float
    timezone: float
    dst: str
    outbound_routes: frozenset[int] = field(default_factory=frozenset, repr=False)
    inbound_routes: frozenset[int] = field(default_factory=frozenset, repr=False)


@dataclass(frozen=True)
class AirlineRecord:
    """Airline row from ``airlines.dat``."""

    airline_id: int
    name: str
    alias: str
    iata: str
    icao: str
    callsign: str
    country: str
    active: bool


@dataclass(frozen=True)
class RouteRecord:
    """Route row from ``routes.dat``.

    Routes carry no identity of their own: two rows with identical
    fields are distinct entries. The resolved references are attached
    by the cross-referencer; ``source`` and ``destination`` are always
    present on routes held by a built database.

    Attributes:
        airline: Airline IATA or ICAO code.
        airline_id: Foreign key into the airlines dataset.
        source_airport: Source airport code.
        source_airport_id: Foreign key into the airports dataset.
        dest_airport: Destination airport code.
        dest_airport_id: Foreign key into the airports dataset.
        codeshare: Whether the route is operated by another carrier.
        stops: Number of stops, zero for direct flights.
        equipment: Raw, space separated aircraft type list.
        source: Resolved source airport.
        destination: Resolved destination airport.
        carrier: Resolved airline, None when the airline id is unknown.
    """

    airline: str
    airline_id: int
    source_airport: str
    source_airport_id: int
    dest_airport: str
    dest_airport_id: int
    codeshare: bool
    stops: int
    equipment: str
    source: AirportRecord | None = field(default=None, repr=False, compare=False)
    destination: AirportRecord | None = field(default=None, repr=False, compare=False)
    carrier: AirlineRecord | None = field(default=None, repr=False, compare=False)


@dataclass(frozen=True)
class IngestDiagnostic:
    """Row- or field-level problem recorded during ingest.

    Attributes:
        dataset: Dataset kind the row belongs to.
        row_number: One-based row number within the source.
        reason: Machine-readable reason code.
        detail: Human-readable description.
    """

    dataset: DatasetKind
    row_number: int
    reason: str
    detail: str


@dataclass(frozen=True)
class DatasetSources:
    """Source descriptors for one dataset triple.

    Attributes:
        airports: Path or URL of the airports dataset.
        routes: Path or URL of the routes dataset.
        airlines: Path or URL of the airlines dataset.
    """

    airports: str
    routes: str
    airlines: str


class GeoPoint(NamedTuple):
    """Airport position with a route-count weight."""

    longitude: float
    latitude: float
    weight: int


class GeoSegment(NamedTuple):
    """Undirected route segment between two coordinates."""

    source_longitude: float
    source_latitude: float
    dest_longitude: float
    dest_latitude: float
