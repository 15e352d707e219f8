"""Per-dataset collection builders.

Builders convert fully loaded rows in source order. Airports and
airlines are indexed as soon as they convert; route rows become
candidates for cross-referencing once their airport keys are non-zero.
Rejected rows and field problems are returned as diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from core.constants import UNRESOLVED_ID
from core.errors import ArityError, FieldParseError
from core.logging_config import get_logger
from core.types import AirlineRecord, AirportRecord, DatasetKind, IngestDiagnostic, RouteRecord
from ingest.record_converter import convert_airline, convert_airport, convert_route

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class AirportIndex:
    """Primary and secondary airport indices."""

    by_id: dict[int, AirportRecord]
    by_iata: dict[str, AirportRecord]
    by_icao: dict[str, AirportRecord]


@dataclass(frozen=True)
class AirportCollection:
    """Converted airports in source order with their indices."""

    records: tuple[AirportRecord, ...]
    index: AirportIndex
    diagnostics: tuple[IngestDiagnostic, ...]


@dataclass(frozen=True)
class AirlineCollection:
    """Converted airlines in source order with the id index."""

    records: tuple[AirlineRecord, ...]
    by_id: dict[int, AirlineRecord]
    diagnostics: tuple[IngestDiagnostic, ...]


@dataclass(frozen=True)
class RouteCandidate:
    """Converted route awaiting cross-referencing."""

    row_number: int
    record: RouteRecord


@dataclass(frozen=True)
class RouteCandidates:
    """Compact, source-ordered route candidates."""

    candidates: tuple[RouteCandidate, ...]
    diagnostics: tuple[IngestDiagnostic, ...]


def build_airports(rows: Sequence[Sequence[str]]) -> AirportCollection:
    """Convert airport rows and index records with a usable id.

    Args:
        rows: Full airports dataset rows.

    Returns:
        Airport collection with id, IATA and ICAO indices.
    """
    records: list[AirportRecord] = []
    index = AirportIndex(by_id={}, by_iata={}, by_icao={})
    diagnostics: list[IngestDiagnostic] = []
    for row_number, fields in enumerate(rows, 1):
        try:
            conversion = convert_airport(fields)
        except ArityError as error:
            diagnostics.append(_arity_diagnostic("airports", row_number, error))
            continue
        diagnostics.extend(_field_diagnostics("airports", row_number, conversion.field_errors))
        records.append(conversion.record)
        register_airport(index, conversion.record)
    _log_collection_built("airports", len(rows), len(records), diagnostics)
    return AirportCollection(
        records=tuple(records), index=index, diagnostics=tuple(diagnostics)
    )


def build_airlines(rows: Sequence[Sequence[str]]) -> AirlineCollection:
    """Convert airline rows and index records with a usable id."""
    records: list[AirlineRecord] = []
    by_id: dict[int, AirlineRecord] = {}
    diagnostics: list[IngestDiagnostic] = []
    for row_number, fields in enumerate(rows, 1):
        try:
            conversion = convert_airline(fields)
        except ArityError as error:
            diagnostics.append(_arity_diagnostic("airlines", row_number, error))
            continue
        diagnostics.extend(_field_diagnostics("airlines", row_number, conversion.field_errors))
        records.append(conversion.record)
        if conversion.record.airline_id != UNRESOLVED_ID:
            by_id[conversion.record.airline_id] = conversion.record
    _log_collection_built("airlines", len(rows), len(records), diagnostics)
    return AirlineCollection(records=tuple(records), by_id=by_id, diagnostics=tuple(diagnostics))


def build_route_candidates(rows: Sequence[Sequence[str]]) -> RouteCandidates:
    """Convert route rows, dropping rows without usable airport keys.

    A row is dropped when it is too short or when its source or
    destination airport id is zero.

    Args:
        rows: Full routes dataset rows.

    Returns:
        Candidates in source order, without gaps.
    """
    candidates: list[RouteCandidate] = []
    diagnostics: list[IngestDiagnostic] = []
    for row_number, fields in enumerate(rows, 1):
        try:
            conversion = convert_route(fields)
        except ArityError as error:
            diagnostics.append(_arity_diagnostic("routes", row_number, error))
            continue
        diagnostics.extend(_field_diagnostics("routes", row_number, conversion.field_errors))
        route = conversion.record
        if route.dest_airport_id == UNRESOLVED_ID:
            diagnostics.append(
                IngestDiagnostic(
                    dataset="routes",
                    row_number=row_number,
                    reason="missing_dest_airport_id",
                    detail=f"Destination airport id of '{route.dest_airport}' is not specified.",
                )
            )
            continue
        if route.source_airport_id == UNRESOLVED_ID:
            diagnostics.append(
                IngestDiagnostic(
                    dataset="routes",
                    row_number=row_number,
                    reason="missing_source_airport_id",
                    detail=f"Source airport id of '{route.source_airport}' is not specified.",
                )
            )
            continue
        candidates.append(RouteCandidate(row_number=row_number, record=route))
    _log_collection_built("routes", len(rows), len(candidates), diagnostics)
    return RouteCandidates(candidates=tuple(candidates), diagnostics=tuple(diagnostics))


def index_airports(records: Iterable[AirportRecord]) -> AirportIndex:
    """Build airport indices; later duplicate keys overwrite earlier ones."""
    index = AirportIndex(by_id={}, by_iata={}, by_icao={})
    for record in records:
        register_airport(index, record)
    return index


def register_airport(index: AirportIndex, record: AirportRecord) -> None:
    """Register one airport under its id, IATA and ICAO keys.

    Airports whose id is unresolved are kept out of every index.
    """
    if record.airport_id == UNRESOLVED_ID:
        return
    index.by_id[record.airport_id] = record
    index.by_iata[record.iata] = record
    index.by_icao[record.icao] = record


def _arity_diagnostic(
    dataset: DatasetKind, row_number: int, error: ArityError
) -> IngestDiagnostic:
    return IngestDiagnostic(
        dataset=dataset, row_number=row_number, reason="arity", detail=str(error)
    )


def _field_diagnostics(
    dataset: DatasetKind,
    row_number: int,
    field_errors: Iterable[FieldParseError],
) -> list[IngestDiagnostic]:
    return [
        IngestDiagnostic(
            dataset=dataset, row_number=row_number, reason="invalid_field", detail=str(error)
        )
        for error in field_errors
    ]


def _log_collection_built(
    dataset: DatasetKind,
    input_count: int,
    output_count: int,
    diagnostics: Sequence[IngestDiagnostic],
) -> None:
    """Log every diagnostic at debug level and one summary event."""
    for diagnostic in diagnostics:
        _LOGGER.debug(
            "ingest_diagnostic",
            dataset=diagnostic.dataset,
            row_number=diagnostic.row_number,
            reason=diagnostic.reason,
            detail=diagnostic.detail,
        )
    _LOGGER.info(
        "collection_built",
        dataset=dataset,
        input_count=input_count,
        output_count=output_count,
        diagnostic_count=len(diagnostics),
    )
