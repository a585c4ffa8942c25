"""Cached value and cache entry entities."""

from dataclasses import dataclass, replace
from enum import Enum


class ValueKind(str, Enum):
    """How a cached value was produced, and therefore how to compare it."""

    DIGEST = "digest"
    HASH = "hash"


@dataclass(frozen=True)
class CachedValue:
    """A cheap stand-in for a verified token.

    The kind travels with the value so backends never have to guess
    the comparison strategy from the shape of the string.
    """

    value: str
    kind: ValueKind


@dataclass(frozen=True)
class CacheEntry:
    """Immutable in-memory cache entry.

    ``expires_at`` is expressed on the owning backend's monotonic timer.
    """

    cached: CachedValue
    expires_at: float

    def is_expired(self, now: float) -> bool:
        """Check if the entry has expired at ``now``."""
        return now >= self.expires_at

    def refreshed(self, now: float, ttl: float) -> "CacheEntry":
        """Return a copy whose lifetime restarts at ``now``."""
        return replace(self, expires_at=now + ttl)

    @classmethod
    def create(cls, cached: CachedValue, now: float, ttl: float) -> "CacheEntry":
        """Factory method to create a new entry that expires ``ttl`` from ``now``."""
        return cls(cached=cached, expires_at=now + ttl)
