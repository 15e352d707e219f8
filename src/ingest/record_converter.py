"""Row to record converters.

Each converter turns one row of string fields into a typed record.
Rows shorter than the dataset contract raise ``ArityError``. Numeric
fields that fail strict parsing are reported and default to zero, and
the record is still produced.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

from core.constants import (
    AIRLINE_FIELD_COUNT,
    AIRPORT_FIELD_COUNT,
    ROUTE_FIELD_COUNT,
    TRUE_FLAG_CHAR,
)
from core.errors import ArityError, FieldParseError
from core.types import AirlineRecord, AirportRecord, DatasetKind, RouteRecord

RecordT = TypeVar("RecordT")
NumberT = TypeVar("NumberT", int, float)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_REAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class RecordConversion(Generic[RecordT]):
    """Converted record plus field-level parse problems."""

    record: RecordT
    field_errors: tuple[FieldParseError, ...] = ()


class _FieldReader:
    """Reads typed values from a row and collects parse failures."""

    def __init__(self, fields: Sequence[str]) -> None:
        self._fields = fields
        self.errors: list[FieldParseError] = []

    def text(self, position: int) -> str:
        return self._fields[position]

    def integer(self, position: int, field_name: str) -> int:
        return self._number(position, field_name, int, _INTEGER_PATTERN)

    def real(self, position: int, field_name: str) -> float:
        return self._number(position, field_name, float, _REAL_PATTERN)

    def count(self, position: int, field_name: str) -> int:
        value = self.integer(position, field_name)
        if value < 0:
            self.errors.append(FieldParseError(field_name, self._fields[position]))
            return 0
        return value

    def flag(self, position: int) -> bool:
        return self._fields[position].startswith(TRUE_FLAG_CHAR)

    def _number(
        self,
        position: int,
        field_name: str,
        parse: Callable[[str], NumberT],
        pattern: re.Pattern[str],
    ) -> NumberT:
        raw_value = self._fields[position]
        if pattern.fullmatch(raw_value) is None:
            self.errors.append(FieldParseError(field_name, raw_value))
            return parse("0")
        return parse(raw_value)


def convert_airport(fields: Sequence[str]) -> RecordConversion[AirportRecord]:
    """Convert an ``airports.dat`` row.

    Args:
        fields: Row fields in dataset column order.

    Returns:
        Airport record with empty back-reference sets.

    Raises:
        ArityError: If fewer than 11 fields are present.
    """
    reader = _checked_reader("airports", fields, AIRPORT_FIELD_COUNT)
    record = AirportRecord(
        airport_id=reader.integer(0, "airport_id"),
        name=reader.text(1),
        city=reader.text(2),
        country=reader.text(3),
        iata=reader.text(4),
        icao=reader.text(5),
        latitude=reader.real(6, "latitude"),
        longitude=reader.real(7, "longitude"),
        altitude=reader.real(8, "altitude"),
        timezone=reader.real(9, "timezone"),
        dst=reader.text(10)[:1],
    )
    return RecordConversion(record=record, field_errors=tuple(reader.errors))


def convert_airline(fields: Sequence[str]) -> RecordConversion[AirlineRecord]:
    """Convert an ``airlines.dat`` row.

    Raises:
        ArityError: If fewer than 8 fields are present.
    """
    reader = _checked_reader("airlines", fields, AIRLINE_FIELD_COUNT)
    record = AirlineRecord(
        airline_id=reader.integer(0, "airline_id"),
        name=reader.text(1),
        alias=reader.text(2),
        iata=reader.text(3),
        icao=reader.text(4),
        callsign=reader.text(5),
        country=reader.text(6),
        active=reader.flag(7),
    )
    return RecordConversion(record=record, field_errors=tuple(reader.errors))


def convert_route(fields: Sequence[str]) -> RecordConversion[RouteRecord]:
    """Convert a ``routes.dat`` row.

    Unresolved foreign keys (``\\N``) fail strict parsing and become 0.

    Raises:
        ArityError: If fewer than 9 fields are present.
    """
    reader = _checked_reader("routes", fields, ROUTE_FIELD_COUNT)
    record = RouteRecord(
        airline=reader.text(0),
        airline_id=reader.integer(1, "airline_id"),
        source_airport=reader.text(2),
        source_airport_id=reader.integer(3, "source_airport_id"),
        dest_airport=reader.text(4),
        dest_airport_id=reader.integer(5, "dest_airport_id"),
        codeshare=reader.flag(6),
        stops=reader.count(7, "stops"),
        equipment=reader.text(8),
    )
    return RecordConversion(record=record, field_errors=tuple(reader.errors))


def _checked_reader(dataset: DatasetKind, fields: Sequence[str], expected: int) -> _FieldReader:
    """Validate row arity and wrap it in a field reader.

    Raises:
        ArityError: If the row is too short.
    """
    if len(fields) < expected:
        raise ArityError(dataset, len(fields), expected)
    return _FieldReader(fields)
