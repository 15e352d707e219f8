"""Local cache for default dataset downloads.

Default sources are remote. Before fetching, a cached copy is looked up
at a deterministic path under the configured cache root; on a miss the
file is downloaded once and persisted there.
"""

from __future__ import annotations

from pathlib import Path

from core.config import SkygraphConfig
from core.constants import AIRLINES_FILE_NAME, AIRPORTS_FILE_NAME, ROUTES_FILE_NAME
from core.errors import SkygraphSourceError
from core.logging_config import get_logger
from core.types import DatasetKind, DatasetSources
from ingest.row_source import fetch_url_bytes

_LOGGER = get_logger(__name__)

_CACHE_FILE_NAMES: dict[DatasetKind, str] = {
    "airports": AIRPORTS_FILE_NAME,
    "airlines": AIRLINES_FILE_NAME,
    "routes": ROUTES_FILE_NAME,
}


def cache_path(dataset: DatasetKind, config: SkygraphConfig) -> Path:
    """Return the cache location for a dataset kind."""
    return config.cache_root / _CACHE_FILE_NAMES[dataset]


def resolve_cached_source(dataset: DatasetKind, url: str, config: SkygraphConfig) -> str:
    """Resolve a remote dataset URL to a cached local copy.

    Args:
        dataset: Dataset kind, selects the cache file name.
        url: Remote location used on a cache miss.
        config: Runtime configuration holding the cache root.

    Returns:
        Local path of the cached file, or ``url`` when caching is disabled.

    Raises:
        SkygraphSourceError: If the download or the cache write fails.
    """
    if not config.use_cache:
        return url
    target = cache_path(dataset, config)
    if target.is_file():
        _LOGGER.info("source_cache_hit", dataset=dataset, path=str(target))
        return str(target)
    _LOGGER.info("source_cache_miss", dataset=dataset, url=url, path=str(target))
    download_file(url, target, config)
    return str(target)


def resolve_default_sources(config: SkygraphConfig) -> DatasetSources:
    """Build the default source triple, applying the cache when enabled.

    Args:
        config: Runtime configuration with default URLs.

    Returns:
        Source descriptors ready for the ingest pipeline.
    """
    return DatasetSources(
        airports=resolve_cached_source("airports", config.airports_url, config),
        routes=resolve_cached_source("routes", config.routes_url, config),
        airlines=resolve_cached_source("airlines", config.airlines_url, config),
    )


def download_file(url: str, target: Path, config: SkygraphConfig) -> None:
    """Download ``url`` and write its body to ``target``.

    The body is fully fetched before the file is created, so a failed
    download never leaves a partial cache entry behind.

    Raises:
        SkygraphSourceError: If the fetch or the write fails.
    """
    payload = fetch_url_bytes(url, config)
    partial_path = target.with_name(f"{target.name}.partial")
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        partial_path.write_bytes(payload)
        partial_path.replace(target)
    except OSError as error:
        raise SkygraphSourceError(
            f"Failed to write cache file {target}: {error}. "
            "Set SKYGRAPH_CACHE_ROOT to a writable directory."
        ) from error
    _LOGGER.info("source_cached", url=url, path=str(target), size_bytes=len(payload))
