"""Raw tabular row source for ingestion.

This module loads dataset bytes from local paths, HTTP(S) URLs or S3
objects and splits them into rows of string fields. Every source is
read completely before any row is handed to the converters.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Any

import requests

from core.config import SkygraphConfig
from core.constants import HTTP_SOURCE_PREFIXES, S3_SOURCE_PREFIX, SOURCE_ENCODING
from core.errors import SkygraphDependencyError, SkygraphSourceError
from core.logging_config import get_logger
from core.s3_uri import parse_s3_uri

_LOGGER = get_logger(__name__)


def read_rows(source: str, config: SkygraphConfig) -> list[list[str]]:
    """Load all rows of a dataset source.

    Args:
        source: Local path, ``http(s)://`` URL or ``s3://`` URI.
        config: Runtime configuration for timeouts and S3 sessions.

    Returns:
        Ordered rows, each an ordered list of string fields.

    Raises:
        SkygraphSourceError: If the source cannot be read or parsed.
    """
    _LOGGER.info("source_load_started", source=source)
    text = read_source_text(source, config)
    rows = parse_rows(text, source)
    _LOGGER.info("source_load_completed", source=source, row_count=len(rows))
    return rows


def read_source_text(source: str, config: SkygraphConfig) -> str:
    """Fetch the full text content of a dataset source.

    Args:
        source: Local path, ``http(s)://`` URL or ``s3://`` URI.
        config: Runtime configuration.

    Returns:
        Decoded source text.

    Raises:
        SkygraphSourceError: If the source is unreachable or undecodable.
    """
    if source.startswith(HTTP_SOURCE_PREFIXES):
        payload = fetch_url_bytes(source, config)
    elif source.startswith(S3_SOURCE_PREFIX):
        payload = _fetch_s3_bytes(source, config)
    else:
        payload = _read_local_bytes(Path(source).expanduser())
    return _decode_payload(source, payload)


def parse_rows(text: str, source: str) -> list[list[str]]:
    """Split delimited text into rows of fields.

    Quoted fields may contain delimiters; rows may carry more or fewer
    trailing fields than the dataset contract. Blank lines are skipped.

    Args:
        text: Full source text.
        source: Source descriptor for error context.

    Returns:
        Ordered list of non-empty rows.

    Raises:
        SkygraphSourceError: If the text is not valid delimited data.
    """
    reader = csv.reader(io.StringIO(text, newline=""))
    try:
        return [row for row in reader if row]
    except csv.Error as error:
        raise SkygraphSourceError(
            f"Failed to parse {source} at line {reader.line_num}: {error}. "
            "Check the file is a comma separated dataset export."
        ) from error


def fetch_url_bytes(url: str, config: SkygraphConfig) -> bytes:
    """Download the body of an HTTP(S) URL.

    Args:
        url: Source URL.
        config: Runtime configuration holding the request timeout.

    Returns:
        Raw response body.

    Raises:
        SkygraphSourceError: On network failure or non-success status.
    """
    try:
        response = requests.get(url, timeout=config.http_timeout_seconds)
        response.raise_for_status()
    except requests.RequestException as error:
        raise SkygraphSourceError(
            f"Failed to fetch {url}: {error}. "
            "Check network access or point the source at a local copy."
        ) from error
    return response.content


def _read_local_bytes(source_path: Path) -> bytes:
    """Read a local dataset file.

    Raises:
        SkygraphSourceError: If path is missing or unreadable.
    """
    if not source_path.exists():
        raise SkygraphSourceError(
            f"Failed to read source at {source_path}: file does not exist. "
            "Provide an existing dataset file."
        )
    if not source_path.is_file():
        raise SkygraphSourceError(
            f"Failed to read source at {source_path}: path is not a regular file. "
            "Provide a dataset file rather than a directory."
        )
    try:
        return source_path.read_bytes()
    except OSError as error:
        raise SkygraphSourceError(f"Failed to read source at {source_path}: {error}.") from error


def _fetch_s3_bytes(source: str, config: SkygraphConfig) -> bytes:
    """Download one object from S3.

    Raises:
        SkygraphSourceError: If the object cannot be fetched.
        SkygraphDependencyError: If boto3 is missing.
    """
    location = parse_s3_uri(source)
    s3_client = _create_s3_client(config)
    try:
        response = s3_client.get_object(Bucket=location.bucket, Key=location.key)
        return response["Body"].read()
    except Exception as error:
        raise SkygraphSourceError(f"Failed to fetch {source}: {error}.") from error


def _create_s3_client(config: SkygraphConfig) -> Any:
    """Create a boto3 S3 client.

    Args:
        config: Runtime config containing optional profile/region.

    Returns:
        Boto3 S3 client.

    Raises:
        SkygraphDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise SkygraphDependencyError(
            "S3 support requires boto3, but it is not installed. "
            "Install boto3 to load datasets from s3:// sources."
        ) from error
    session_kwargs: dict[str, str] = {}
    if config.s3_profile:
        session_kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        session_kwargs["region_name"] = config.s3_region
    session = boto3.session.Session(**session_kwargs)
    return session.client("s3")


def _decode_payload(source: str, payload: bytes) -> str:
    """Decode raw source bytes.

    Raises:
        SkygraphSourceError: If bytes are not valid UTF-8.
    """
    try:
        return payload.decode(SOURCE_ENCODING)
    except UnicodeDecodeError as error:
        raise SkygraphSourceError(
            f"Failed to decode {source} as {SOURCE_ENCODING}: {error.reason} "
            f"at byte {error.start}."
        ) from error
