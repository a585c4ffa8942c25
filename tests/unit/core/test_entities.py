"""Tests for domain entities."""

import dataclasses

import pytest

from bcrypt_cache import CacheConfig, CachedValue, CacheEntry, ValueKind


class TestCacheConfig:
    """Tests for CacheConfig."""

    def test_defaults(self) -> None:
        """Test default configuration values."""
        config = CacheConfig()

        assert config.ttl == 600
        assert config.prune_interval == 60.0
        assert config.key_prefix == "bcrypt-cache:"
        assert config.timeout == 0.25
        assert config.cheap_rounds == 4

    def test_custom_values(self) -> None:
        """Test custom configuration values."""
        config = CacheConfig(ttl=30, prune_interval=5, key_prefix="app:", timeout=1.0)

        assert config.ttl == 30
        assert config.prune_interval == 5
        assert config.key_prefix == "app:"
        assert config.timeout == 1.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"ttl": 0},
            {"ttl": -1},
            {"prune_interval": 0},
            {"timeout": 0},
            {"cheap_rounds": 3},
            {"cheap_rounds": 32},
        ],
    )
    def test_invalid_values(self, kwargs: dict[str, float]) -> None:
        """Out of range options are rejected."""
        with pytest.raises(ValueError):
            CacheConfig(**kwargs)  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        """Configuration cannot be changed after creation."""
        config = CacheConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.ttl = 1  # type: ignore[misc]


class TestCacheEntry:
    """Tests for CacheEntry."""

    def test_create(self) -> None:
        """Test creating an entry."""
        cached = CachedValue("abc", ValueKind.DIGEST)
        entry = CacheEntry.create(cached, now=100.0, ttl=10)

        assert entry.cached == cached
        assert entry.expires_at == 110.0

    def test_is_expired(self) -> None:
        """Test expiry at and after expires_at."""
        entry = CacheEntry.create(CachedValue("abc", ValueKind.DIGEST), 100.0, 10)

        assert entry.is_expired(105.0) is False
        assert entry.is_expired(110.0) is True
        assert entry.is_expired(111.0) is True

    def test_refreshed(self) -> None:
        """Refreshing restarts the lifetime and leaves the original untouched."""
        entry = CacheEntry.create(CachedValue("abc", ValueKind.DIGEST), 100.0, 10)
        refreshed = entry.refreshed(now=108.0, ttl=10)

        assert refreshed.expires_at == 118.0
        assert refreshed.cached == entry.cached
        assert entry.expires_at == 110.0
