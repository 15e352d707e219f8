"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import SkygraphConfig
from core.constants import DEFAULT_AIRPORTS_URL, DEFAULT_HTTP_TIMEOUT_SECONDS
from core.errors import SkygraphConfigError


def test_from_env_reads_cache_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve cache root from environment."""
    monkeypatch.setenv("SKYGRAPH_CACHE_ROOT", "./.tmp-skygraph")

    config = SkygraphConfig.from_env()

    assert config.cache_root.name == ".tmp-skygraph" and config.cache_root.is_absolute()


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables should fall back to documented defaults."""
    for variable in ("SKYGRAPH_USE_CACHE", "SKYGRAPH_HTTP_TIMEOUT", "SKYGRAPH_AIRPORTS_URL"):
        monkeypatch.delenv(variable, raising=False)

    config = SkygraphConfig.from_env()

    assert config.use_cache is True
    assert config.http_timeout_seconds == DEFAULT_HTTP_TIMEOUT_SECONDS
    assert config.airports_url == DEFAULT_AIRPORTS_URL


def test_from_env_parses_cache_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    """Cache flag should accept common boolean spellings."""
    monkeypatch.setenv("SKYGRAPH_USE_CACHE", "No")

    config = SkygraphConfig.from_env()

    assert config.use_cache is False


def test_from_env_raises_for_invalid_cache_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unrecognized boolean values."""
    monkeypatch.setenv("SKYGRAPH_USE_CACHE", "sometimes")

    with pytest.raises(SkygraphConfigError):
        SkygraphConfig.from_env()


@pytest.mark.parametrize("raw_timeout", ["not-a-number", "0", "-3"])
def test_from_env_raises_for_invalid_timeout(
    monkeypatch: pytest.MonkeyPatch, raw_timeout: str
) -> None:
    """Config should fail for non-numeric or non-positive timeouts."""
    monkeypatch.setenv("SKYGRAPH_HTTP_TIMEOUT", raw_timeout)

    with pytest.raises(SkygraphConfigError):
        SkygraphConfig.from_env()
