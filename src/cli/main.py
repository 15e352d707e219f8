"""Skygraph CLI entry points.
This module exposes lookup, adjacency and geo commands over a built
route database. It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import json
import logging
from pathlib import Path
from typing import Sequence

from core.config import SkygraphConfig
from core.logging_config import configure_logging
from core.types import AirportRecord, RouteRecord
from skygraph import open_database
from store.record_payload import airport_to_payload, route_to_payload
from store.route_database import RouteDatabase


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="skygraph", description="Skygraph route database CLI")
    parser.add_argument("--cache-root", help="Override SKYGRAPH_CACHE_ROOT for this command")
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Fetch default sources directly instead of using the cache",
    )
    parser.add_argument(
        "--sources",
        nargs=3,
        metavar=("AIRPORTS", "ROUTES", "AIRLINES"),
        help="Explicit dataset sources (paths or URLs)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log ingest diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("summary", help="Print record and diagnostic counts")
    airport_parser = subparsers.add_parser("airport", help="Show one airport")
    airport_parser.add_argument("code", help="Airport id, IATA or ICAO code")
    routes_parser = subparsers.add_parser("routes", help="List routes of an airport")
    routes_parser.add_argument("code", help="Airport id, IATA or ICAO code")
    routes_parser.add_argument(
        "--direction",
        choices=("from", "to", "all"),
        default="all",
        help="Outbound, inbound or all routes",
    )
    geo_parser = subparsers.add_parser("geo", help="Print geo aggregations")
    geo_parser.add_argument("kind", choices=("points", "segments"))
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the skygraph CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        configure_logging(logging.DEBUG)
    database = _build_database(args)
    if args.command == "summary":
        return _print_json(database.summary())
    if args.command == "airport":
        return _run_airport_command(database, args)
    if args.command == "routes":
        return _run_routes_command(database, args)
    if args.command == "geo":
        return _run_geo_command(database, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_database(args: argparse.Namespace) -> RouteDatabase:
    """Build the route database from CLI overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Built route database.
    """
    config = SkygraphConfig.from_env()
    if args.cache_root:
        config = replace(config, cache_root=Path(args.cache_root).expanduser().resolve())
    if args.no_cache:
        config = replace(config, use_cache=False)
    sources = args.sources or ()
    return open_database(*sources, config=config)


def _run_airport_command(database: RouteDatabase, args: argparse.Namespace) -> int:
    airport = find_airport(database, args.code)
    if airport is None:
        return _report_missing_airport(args.code)
    return _print_json(airport_to_payload(airport))


def _run_routes_command(database: RouteDatabase, args: argparse.Namespace) -> int:
    """Handle routes command.

    Args:
        database: Built route database.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    airport = find_airport(database, args.code)
    if airport is None:
        return _report_missing_airport(args.code)
    routes: list[RouteRecord]
    if args.direction == "from":
        routes = database.routes_from(airport.airport_id)
    elif args.direction == "to":
        routes = database.routes_to(airport.airport_id)
    else:
        routes = database.routes_by_airport(airport.airport_id)
    for route in routes:
        print(json.dumps(route_to_payload(route), sort_keys=True))
    return 0


def _run_geo_command(database: RouteDatabase, args: argparse.Namespace) -> int:
    rows = database.airport_geo_points() if args.kind == "points" else database.route_geo_segments()
    for row in rows:
        print(json.dumps(list(row)))
    return 0


def find_airport(database: RouteDatabase, code: str) -> AirportRecord | None:
    """Resolve a numeric id, IATA or ICAO code to an airport.

    Args:
        database: Built route database.
        code: Airport id, 3-letter IATA or 4-letter ICAO code.

    Returns:
        Matching airport, or None.
    """
    if code.isdigit():
        return database.lookup_airport(int(code))
    normalized = code.upper()
    if len(normalized) == 4:
        return database.lookup_airport_by_icao(normalized)
    return database.lookup_airport_by_iata(normalized)


def _report_missing_airport(code: str) -> int:
    print(json.dumps({"error": f"airport not found: {code}"}))
    return 1


def _print_json(payload: dict[str, object]) -> int:
    print(json.dumps(payload, sort_keys=True))
    return 0
