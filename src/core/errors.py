"""Skygraph exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class SkygraphError(Exception):
    """Base exception for all skygraph failures."""


class SkygraphConfigError(SkygraphError):
    """Raised for invalid runtime configuration."""


class SkygraphSourceError(SkygraphError):
    """Raised when a dataset source cannot be fetched or parsed."""


class SkygraphDependencyError(SkygraphError):
    """Raised when an optional runtime dependency is missing."""


class SkygraphUsageError(SkygraphError):
    """Raised when a construction entry point is called incorrectly."""


class RecordConversionError(SkygraphError):
    """Base exception for row-level conversion failures."""


class ArityError(RecordConversionError):
    """Raised when a row has fewer fields than its record kind requires."""

    def __init__(self, dataset: str, actual: int, expected: int) -> None:
        super().__init__(
            f"Invalid field count for {dataset} record: {actual}/{expected}"
        )
        self.dataset = dataset
        self.actual = actual
        self.expected = expected


class FieldParseError(RecordConversionError):
    """Reported when a numeric field fails strict parsing."""

    def __init__(self, field_name: str, raw_value: str) -> None:
        super().__init__(f"Invalid numeric value for '{field_name}': {raw_value!r}")
        self.field_name = field_name
        self.raw_value = raw_value


class UnknownAirportError(SkygraphError):
    """Raised when an adjacency query targets an airport id that is not indexed."""

    def __init__(self, airport_id: int) -> None:
        super().__init__(
            f"Unknown airport id {airport_id}: no airport with this id was ingested. "
            "Look the airport up by IATA or ICAO code to find its id."
        )
        self.airport_id = airport_id
