"""Unit tests for the default source cache."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest
import requests

from core.config import SkygraphConfig
from core.errors import SkygraphSourceError
from ingest.source_cache import cache_path, resolve_cached_source, resolve_default_sources


class _FakeResponse:
    def __init__(self, content: bytes) -> None:
        self.content = content

    def raise_for_status(self) -> None:
        return None


def test_resolve_cached_source_uses_existing_copy(
    monkeypatch: pytest.MonkeyPatch, offline_config: SkygraphConfig
) -> None:
    """A cache hit should return the local path without network access."""
    cached = cache_path("airports", offline_config)
    cached.parent.mkdir(parents=True)
    cached.write_text("1,cached\n", encoding="utf-8")

    def unexpected_get(url: str, timeout: float) -> _FakeResponse:
        raise AssertionError("network must not be used on a cache hit")

    monkeypatch.setattr(requests, "get", unexpected_get)

    resolved = resolve_cached_source("airports", offline_config.airports_url, offline_config)

    assert resolved == str(cached)


def test_resolve_cached_source_downloads_on_miss(
    monkeypatch: pytest.MonkeyPatch, offline_config: SkygraphConfig
) -> None:
    """A cache miss should download once and persist the body."""
    monkeypatch.setattr(requests, "get", lambda url, timeout: _FakeResponse(b"10,Air\n"))

    resolved = resolve_cached_source("airlines", offline_config.airlines_url, offline_config)

    assert Path(resolved).name == "airlines.dat"
    assert Path(resolved).read_bytes() == b"10,Air\n"


def test_resolve_cached_source_leaves_no_file_on_failed_download(
    monkeypatch: pytest.MonkeyPatch, offline_config: SkygraphConfig
) -> None:
    """A failed download is fatal and must not create a cache entry."""

    def failing_get(url: str, timeout: float) -> _FakeResponse:
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr(requests, "get", failing_get)

    with pytest.raises(SkygraphSourceError):
        resolve_cached_source("routes", offline_config.routes_url, offline_config)

    assert cache_path("routes", offline_config).exists() is False


def test_resolve_cached_source_returns_url_when_cache_disabled(
    offline_config: SkygraphConfig,
) -> None:
    """Disabling the cache should pass the remote URL through unchanged."""
    config = replace(offline_config, use_cache=False)

    resolved = resolve_cached_source("routes", config.routes_url, config)

    assert resolved == config.routes_url


def test_resolve_default_sources_maps_each_dataset_to_its_file(
    monkeypatch: pytest.MonkeyPatch, offline_config: SkygraphConfig
) -> None:
    """Every dataset kind should get its own deterministic cache file."""
    monkeypatch.setattr(requests, "get", lambda url, timeout: _FakeResponse(url.encode("utf-8")))

    sources = resolve_default_sources(offline_config)

    assert Path(sources.airports).read_text(encoding="utf-8") == offline_config.airports_url
    assert Path(sources.routes).name == "routes.dat"
    assert Path(sources.airlines).parent == offline_config.cache_root
