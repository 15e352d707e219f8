"""Ingest orchestration for the route database.

This module loads the three datasets, converts and indexes airports
and airlines, cross-references routes, and assembles an immutable
route database. Any source failure aborts the whole build.
"""

from __future__ import annotations

from core.config import SkygraphConfig
from core.logging_config import get_logger
from core.types import DatasetSources, IngestDiagnostic
from ingest.collection_builder import build_airlines, build_airports, build_route_candidates
from ingest.cross_reference import link_routes
from ingest.row_source import read_rows
from ingest.source_cache import resolve_default_sources
from store.route_database import RouteDatabase

_LOGGER = get_logger(__name__)


def build_database(sources: DatasetSources, config: SkygraphConfig) -> RouteDatabase:
    """Build a route database from explicit sources.

    Airports and airlines are fully indexed before routes are
    cross-referenced.

    Args:
        sources: Airports, routes and airlines source descriptors.
        config: Runtime configuration.

    Returns:
        Fully linked, read-only route database.

    Raises:
        SkygraphSourceError: If any source cannot be read or parsed.
    """
    airports = build_airports(read_rows(sources.airports, config))
    airlines = build_airlines(read_rows(sources.airlines, config))
    candidates = build_route_candidates(read_rows(sources.routes, config))
    graph = link_routes(candidates, airports, airlines)
    diagnostics: tuple[IngestDiagnostic, ...] = (
        airports.diagnostics
        + airlines.diagnostics
        + candidates.diagnostics
        + graph.diagnostics
    )
    database = RouteDatabase(
        airports=graph.airports,
        airports_by_id=graph.airport_index.by_id,
        airports_by_iata=graph.airport_index.by_iata,
        airports_by_icao=graph.airport_index.by_icao,
        airlines=airlines.records,
        airlines_by_id=airlines.by_id,
        routes=graph.routes,
        diagnostics=diagnostics,
    )
    _LOGGER.info("database_built", sources=_sources_payload(sources), **database.summary())
    return database


def build_default_database(config: SkygraphConfig) -> RouteDatabase:
    """Build a route database from the configured default sources.

    Default sources are served from the local cache when enabled and
    downloaded on a cache miss.
    """
    return build_database(resolve_default_sources(config), config)


def _sources_payload(sources: DatasetSources) -> dict[str, str]:
    return {
        "airports": sources.airports,
        "routes": sources.routes,
        "airlines": sources.airlines,
    }
