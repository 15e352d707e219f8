"""Unit tests for CLI command handling."""

from __future__ import annotations

import json

import pytest

from cli.main import main
from core.types import DatasetSources


def _source_args(sources: DatasetSources) -> list[str]:
    return ["--sources", sources.airports, sources.routes, sources.airlines]


def test_cli_summary_prints_counts(fixture_sources: DatasetSources, capsys) -> None:
    """Summary command should print record counts as JSON."""
    exit_code = main([*_source_args(fixture_sources), "summary"])
    output = json.loads(capsys.readouterr().out)

    assert exit_code == 0 and output["route_count"] == 4


def test_cli_airport_resolves_iata_and_icao(fixture_sources: DatasetSources, capsys) -> None:
    """Airport command accepts IATA and ICAO codes."""
    main([*_source_args(fixture_sources), "airport", "jfk"])
    by_iata = json.loads(capsys.readouterr().out)
    main([*_source_args(fixture_sources), "airport", "EDDL"])
    by_icao = json.loads(capsys.readouterr().out)

    assert by_iata["city"] == "New York" and by_icao["iata"] == "DUS"


def test_cli_airport_reports_missing_code(fixture_sources: DatasetSources, capsys) -> None:
    """Unknown airports return a non-zero exit code."""
    exit_code = main([*_source_args(fixture_sources), "airport", "ZZZ"])

    assert exit_code == 1 and "not found" in capsys.readouterr().out


def test_cli_routes_filters_by_direction(fixture_sources: DatasetSources, capsys) -> None:
    """Routes command prints one JSON line per route."""
    main([*_source_args(fixture_sources), "routes", "2", "--direction", "to"])
    lines = capsys.readouterr().out.strip().splitlines()

    assert len(lines) == 2
    assert {json.loads(line)["carrier_name"] for line in lines} == {
        "Air Berlin",
        "American Airlines",
    }


def test_cli_geo_segments(fixture_sources: DatasetSources, capsys) -> None:
    """Geo command prints one coordinate list per segment."""
    main([*_source_args(fixture_sources), "geo", "segments"])
    lines = capsys.readouterr().out.strip().splitlines()

    assert len(lines) == 2 and len(json.loads(lines[0])) == 4


def test_cli_rejects_partial_sources(fixture_sources: DatasetSources) -> None:
    """Argparse should reject a source list that is not a full triple."""
    with pytest.raises(SystemExit):
        main(["--sources", fixture_sources.airports, "summary"])
