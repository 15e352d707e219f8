"""Route cross-referencing.

Resolves route foreign keys against the airport and airline id indices
and fills every airport's inbound and outbound back-reference sets with
route handles. A handle is the route's position in the final route
tuple, so airports never hold route objects directly.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, replace

from core.constants import UNRESOLVED_ID
from core.logging_config import get_logger
from core.types import AirlineRecord, AirportRecord, IngestDiagnostic, RouteRecord
from ingest.collection_builder import (
    AirlineCollection,
    AirportCollection,
    AirportIndex,
    RouteCandidates,
    index_airports,
)

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class LinkedGraph:
    """Airports and routes after cross-referencing.

    Attributes:
        airports: Airports in source order, back-references attached.
        airport_index: Indices over ``airports``.
        routes: Retained routes in source order; position is the handle.
        diagnostics: Routes dropped or left without an airline.
    """

    airports: tuple[AirportRecord, ...]
    airport_index: AirportIndex
    routes: tuple[RouteRecord, ...]
    diagnostics: tuple[IngestDiagnostic, ...]


def link_routes(
    candidates: RouteCandidates,
    airports: AirportCollection,
    airlines: AirlineCollection,
) -> LinkedGraph:
    """Resolve route references and build airport back-references.

    Routes whose source or destination airport is not indexed are
    dropped. Routes with an unknown airline are kept without a carrier.

    Args:
        candidates: Converted routes with non-zero airport keys.
        airports: Indexed airport collection.
        airlines: Indexed airline collection.

    Returns:
        Linked airports and routes.
    """
    outbound: defaultdict[int, set[int]] = defaultdict(set)
    inbound: defaultdict[int, set[int]] = defaultdict(set)
    linked: list[tuple[RouteRecord, AirlineRecord | None]] = []
    diagnostics: list[IngestDiagnostic] = []
    airports_by_id = airports.index.by_id
    for candidate in candidates.candidates:
        route = candidate.record
        if route.source_airport_id not in airports_by_id:
            diagnostics.append(
                _route_diagnostic(
                    candidate.row_number,
                    "unresolved_source_airport",
                    f"Could not find source airport id {route.source_airport_id}"
                    f"/{route.source_airport}. Ignoring route.",
                )
            )
            continue
        if route.dest_airport_id not in airports_by_id:
            diagnostics.append(
                _route_diagnostic(
                    candidate.row_number,
                    "unresolved_dest_airport",
                    f"Could not find destination airport id {route.dest_airport_id}"
                    f"/{route.dest_airport}. Ignoring route.",
                )
            )
            continue
        carrier = (
            None if route.airline_id == UNRESOLVED_ID else airlines.by_id.get(route.airline_id)
        )
        if carrier is None:
            diagnostics.append(
                _route_diagnostic(
                    candidate.row_number,
                    "unresolved_airline",
                    f"Could not find airline id {route.airline_id}/{route.airline}.",
                )
            )
        handle = len(linked)
        outbound[route.source_airport_id].add(handle)
        inbound[route.dest_airport_id].add(handle)
        linked.append((route, carrier))

    final_airports = tuple(
        replace(
            airport,
            outbound_routes=frozenset(outbound.get(airport.airport_id, ())),
            inbound_routes=frozenset(inbound.get(airport.airport_id, ())),
        )
        for airport in airports.records
    )
    final_index = index_airports(final_airports)
    routes = tuple(
        replace(
            route,
            source=final_index.by_id[route.source_airport_id],
            destination=final_index.by_id[route.dest_airport_id],
            carrier=carrier,
        )
        for route, carrier in linked
    )
    _LOGGER.info(
        "routes_linked",
        candidate_count=len(candidates.candidates),
        route_count=len(routes),
        dropped_count=len(candidates.candidates) - len(routes),
    )
    return LinkedGraph(
        airports=final_airports,
        airport_index=final_index,
        routes=routes,
        diagnostics=tuple(diagnostics),
    )


def _route_diagnostic(row_number: int, reason: str, detail: str) -> IngestDiagnostic:
    return IngestDiagnostic(dataset="routes", row_number=row_number, reason=reason, detail=detail)
