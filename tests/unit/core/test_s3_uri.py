"""Unit tests for S3 URI parsing."""

from __future__ import annotations

import pytest

from core.errors import SkygraphSourceError
from core.s3_uri import parse_s3_uri


def test_parse_s3_uri_splits_bucket_and_key() -> None:
    """Parser should split bucket from a nested object key."""
    location = parse_s3_uri("s3://flight-data/openflights/routes.dat")

    assert location.bucket == "flight-data"
    assert location.key == "openflights/routes.dat"


@pytest.mark.parametrize("uri", ["s3://flight-data", "s3://flight-data/", "s3:///routes.dat"])
def test_parse_s3_uri_rejects_incomplete_uri(uri: str) -> None:
    """Parser should reject URIs without a bucket or an object key."""
    with pytest.raises(SkygraphSourceError):
        parse_s3_uri(uri)
