"""JSON-safe payloads for route database records.

Resolved references and back-reference handle sets are not part of a
record payload; routes expose the resolved names instead so a payload
never recurses into the graph.
"""

from __future__ import annotations

from dataclasses import asdict

from core.types import AirlineRecord, AirportRecord, IngestDiagnostic, RouteRecord


def airport_to_payload(record: AirportRecord) -> dict[str, object]:
    """Serialize an airport without its back-reference sets.

    Args:
        record: Airport record.

    Returns:
        Dictionary payload for JSON encoding.
    """
    return {
        "airport_id": record.airport_id,
        "name": record.name,
        "city": record.city,
        "country": record.country,
        "iata": record.iata,
        "icao": record.icao,
        "latitude": record.latitude,
        "longitude": record.longitude,
        "altitude": record.altitude,
        "timezone": record.timezone,
        "dst": record.dst,
        "outbound_route_count": len(record.outbound_routes),
        "inbound_route_count": len(record.inbound_routes),
    }


def airline_to_payload(record: AirlineRecord) -> dict[str, object]:
    """Serialize an airline."""
    return asdict(record)


def route_to_payload(record: RouteRecord) -> dict[str, object]:
    """Serialize a route with resolved endpoint and carrier names.

    Args:
        record: Linked route record.

    Returns:
        Dictionary payload for JSON encoding.
    """
    return {
        "airline": record.airline,
        "airline_id": record.airline_id,
        "source_airport": record.source_airport,
        "source_airport_id": record.source_airport_id,
        "dest_airport": record.dest_airport,
        "dest_airport_id": record.dest_airport_id,
        "codeshare": record.codeshare,
        "stops": record.stops,
        "equipment": record.equipment,
        "source_name": record.source.name if record.source else None,
        "destination_name": record.destination.name if record.destination else None,
        "carrier_name": record.carrier.name if record.carrier else None,
    }


def diagnostic_to_payload(diagnostic: IngestDiagnostic) -> dict[str, object]:
    """Serialize an ingest diagnostic."""
    return asdict(diagnostic)
