"""Runtime configuration model for skygraph.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_AIRLINES_URL,
    DEFAULT_AIRPORTS_URL,
    DEFAULT_CACHE_ROOT,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_ROUTES_URL,
)
from core.errors import SkygraphConfigError

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class SkygraphConfig:
    """Validated runtime configuration.

    Attributes:
        cache_root: Directory holding cached copies of the default datasets.
        use_cache: Whether default sources are served from the cache.
        http_timeout_seconds: Timeout applied to each HTTP fetch.
        airports_url: Default airports dataset location.
        airlines_url: Default airlines dataset location.
        routes_url: Default routes dataset location.
        s3_region: Optional AWS region for ``s3://`` sources.
        s3_profile: Optional AWS profile for boto3 session initialization.
    """

    cache_root: Path = DEFAULT_CACHE_ROOT
    use_cache: bool = True
    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    airports_url: str = DEFAULT_AIRPORTS_URL
    airlines_url: str = DEFAULT_AIRLINES_URL
    routes_url: str = DEFAULT_ROUTES_URL
    s3_region: str | None = None
    s3_profile: str | None = None

    @classmethod
    def from_env(cls) -> "SkygraphConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            SkygraphConfigError: If environment values are invalid.
        """
        cache_root_value = os.getenv("SKYGRAPH_CACHE_ROOT", str(DEFAULT_CACHE_ROOT))
        use_cache = _parse_bool("SKYGRAPH_USE_CACHE", os.getenv("SKYGRAPH_USE_CACHE", "true"))
        timeout = _parse_timeout(
            os.getenv("SKYGRAPH_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT_SECONDS))
        )
        return cls(
            cache_root=Path(cache_root_value).expanduser().resolve(),
            use_cache=use_cache,
            http_timeout_seconds=timeout,
            airports_url=os.getenv("SKYGRAPH_AIRPORTS_URL", DEFAULT_AIRPORTS_URL),
            airlines_url=os.getenv("SKYGRAPH_AIRLINES_URL", DEFAULT_AIRLINES_URL),
            routes_url=os.getenv("SKYGRAPH_ROUTES_URL", DEFAULT_ROUTES_URL),
            s3_region=os.getenv("SKYGRAPH_S3_REGION"),
            s3_profile=os.getenv("SKYGRAPH_S3_PROFILE"),
        )


def _parse_bool(variable: str, raw_value: str) -> bool:
    """Parse a boolean environment value.

    Args:
        variable: Environment variable name for error context.
        raw_value: Raw string from environment.

    Returns:
        Parsed flag.

    Raises:
        SkygraphConfigError: If value is not a recognized boolean.
    """
    normalized = raw_value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise SkygraphConfigError(
        f"Invalid {variable} value: expected one of "
        f"{_TRUE_VALUES + _FALSE_VALUES}, got '{raw_value}'."
    )


def _parse_timeout(raw_value: str) -> float:
    """Parse the HTTP timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Positive timeout in seconds.

    Raises:
        SkygraphConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise SkygraphConfigError(
            "Invalid SKYGRAPH_HTTP_TIMEOUT value: "
            f"expected number of seconds, got '{raw_value}'. "
            "Set SKYGRAPH_HTTP_TIMEOUT to a numeric value."
        ) from error
    if timeout <= 0:
        raise SkygraphConfigError(
            f"Invalid SKYGRAPH_HTTP_TIMEOUT value: expected a positive number, got '{raw_value}'."
        )
    return timeout
