"""Public SDK surface for skygraph.

This module provides a stable import path for library users.
It re-exports the construction entry point and typed models.
"""

from __future__ import annotations

from core.config import SkygraphConfig
from core.errors import (
    ArityError,
    SkygraphError,
    SkygraphSourceError,
    SkygraphUsageError,
    UnknownAirportError,
)
from core.types import (
    AirlineRecord,
    AirportRecord,
    DatasetSources,
    GeoPoint,
    GeoSegment,
    IngestDiagnostic,
    RouteRecord,
)
from ingest.pipeline import build_database, build_default_database
from store.route_database import RouteDatabase

__all__ = [
    "AirlineRecord",
    "AirportRecord",
    "ArityError",
    "DatasetSources",
    "GeoPoint",
    "GeoSegment",
    "IngestDiagnostic",
    "RouteDatabase",
    "RouteRecord",
    "SkygraphConfig",
    "SkygraphError",
    "SkygraphSourceError",
    "SkygraphUsageError",
    "UnknownAirportError",
    "build_database",
    "build_default_database",
    "open_database",
]


def open_database(*sources: str, config: SkygraphConfig | None = None) -> RouteDatabase:
    """Build a route database from defaults or from three explicit sources.

    With no sources the configured default URLs are used, served from
    the local cache when enabled. Otherwise exactly three sources are
    required, in the order airports, routes, airlines.

    Args:
        sources: Either nothing or airports, routes and airlines sources.
        config: Optional runtime configuration; read from env if omitted.

    Returns:
        Fully linked route database.

    Raises:
        SkygraphUsageError: If the number of sources is neither 0 nor 3.
        SkygraphSourceError: If any source cannot be read.
    """
    if len(sources) not in (0, 3):
        raise SkygraphUsageError(
            f"Invalid source count {len(sources)}: either none or all three "
            "sources (airports, routes, airlines) must be given."
        )
    runtime_config = config or SkygraphConfig.from_env()
    if not sources:
        return build_default_database(runtime_config)
    airports, routes, airlines = sources
    return build_database(
        DatasetSources(airports=airports, routes=routes, airlines=airlines),
        runtime_config,
    )
