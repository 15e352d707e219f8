"""Core constants used across skygraph modules.

This module centralizes dataset contracts and runtime defaults.
Keeping values here avoids magic literals in ingest and query logic.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

OPENFLIGHTS_DATA_BASE_URL = "https://raw.githubusercontent.com/jpatokal/openflights/master/data"
DEFAULT_AIRPORTS_URL = f"{OPENFLIGHTS_DATA_BASE_URL}/airports.dat"
DEFAULT_AIRLINES_URL = f"{OPENFLIGHTS_DATA_BASE_URL}/airlines.dat"
DEFAULT_ROUTES_URL = f"{OPENFLIGHTS_DATA_BASE_URL}/routes.dat"
DEFAULT_CACHE_ROOT = Path(tempfile.gettempdir()) / "skygraph"
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0
AIRPORTS_FILE_NAME = "airports.dat"
AIRLINES_FILE_NAME = "airlines.dat"
ROUTES_FILE_NAME = "routes.dat"
SOURCE_ENCODING = "utf-8"
HTTP_SOURCE_PREFIXES = ("http://", "https://")
S3_SOURCE_PREFIX = "s3://"
AIRPORT_FIELD_COUNT = 11
AIRLINE_FIELD_COUNT = 8
ROUTE_FIELD_COUNT = 9
TRUE_FLAG_CHAR = "Y"
UNRESOLVED_ID = 0
GEO_WEIGHT_BIAS = 1
