"""S3 URI parsing helpers.

Dataset sources may live in object storage. This module validates
``s3://bucket/key`` descriptors before the row source opens them.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import S3_SOURCE_PREFIX
from core.errors import SkygraphSourceError


@dataclass(frozen=True)
class S3Location:
    """Parsed S3 object location."""

    bucket: str
    key: str


def parse_s3_uri(uri: str) -> S3Location:
    """Parse and validate an S3 object URI.

    Args:
        uri: URI in format ``s3://bucket/key``.

    Returns:
        Parsed bucket and key pair.

    Raises:
        SkygraphSourceError: If bucket or key is missing.
    """
    stripped_uri = uri.removeprefix(S3_SOURCE_PREFIX)
    bucket, _, key = stripped_uri.partition("/")
    if not bucket or not key or key.endswith("/"):
        raise SkygraphSourceError(
            f"Invalid S3 URI '{uri}': expected s3://bucket/key. "
            "Point the source at a single dataset object."
        )
    return S3Location(bucket=bucket, key=key)
