"""Pytest configuration and shared fixtures for repository test runs."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import SkygraphConfig
from core.types import DatasetSources
from ingest.pipeline import build_database
from store.route_database import RouteDatabase
from tests.fixture_paths import openflights_sources


@pytest.fixture
def offline_config(tmp_path: Path) -> SkygraphConfig:
    """Config with an isolated cache root and unreachable default URLs."""
    return SkygraphConfig(
        cache_root=tmp_path / "cache",
        airports_url="http://datasets.invalid/airports.dat",
        airlines_url="http://datasets.invalid/airlines.dat",
        routes_url="http://datasets.invalid/routes.dat",
    )


@pytest.fixture
def fixture_sources() -> DatasetSources:
    """Source triple pointing at the bundled OpenFlights fixtures."""
    return openflights_sources()


@pytest.fixture
def fixture_database(
    fixture_sources: DatasetSources, offline_config: SkygraphConfig
) -> RouteDatabase:
    """Route database built from the bundled fixtures."""
    return build_database(fixture_sources, offline_config)
