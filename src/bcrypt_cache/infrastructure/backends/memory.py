"""In-memory cache backend implementation."""

import asyncio
import contextlib
import hmac
import logging
import math
import time
from collections.abc import Callable

from cachetools import TTLCache  # type: ignore[import-untyped]

from bcrypt_cache.core.entities.cache_entry import CachedValue, CacheEntry, ValueKind
from bcrypt_cache.core.interfaces.password_hasher import IPasswordHasher
from bcrypt_cache.infrastructure.hashers.bcrypt import BcryptHasher
from bcrypt_cache.utils.hashing import digest

logger = logging.getLogger(__name__)


class InMemoryCacheBackend:
    """In-memory cache backend with sliding TTL expiration.

    Suitable for single-process deployments. Entries live in an unbounded
    cachetools TTLCache; reads restart an entry's lifetime, and a
    background task owned by the backend prunes expired entries every
    ``prune_interval`` seconds. Values are MD5 digests of the token, since
    process memory is not expected to be readable by an attacker.
    """

    def __init__(
        self,
        ttl: float = 600.0,
        prune_interval: float = 60.0,
        hasher: IPasswordHasher | None = None,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache backend.

        Args:
            ttl: Seconds an entry lives after it was last written or read.
            prune_interval: Seconds between scans for expired entries.
            hasher: Hasher used to compare values that are bcrypt hashes.
            timer: Monotonic clock, in seconds.
        """
        self._ttl = ttl
        self._prune_interval = prune_interval
        self._hasher = hasher or BcryptHasher()
        self._timer = timer
        self._cache: TTLCache[str, CacheEntry] = TTLCache(
            maxsize=math.inf,
            ttl=ttl,
            timer=timer,
        )
        self._lock = asyncio.Lock()
        self._pruner: asyncio.Task[None] | None = None

    async def get(self, key: str) -> CachedValue | None:
        """Retrieve a cached value and restart its lifetime.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value, or None if not found or expired.
        """
        self._ensure_pruner()
        async with self._lock:
            now = self._timer()
            self._cache.expire(now)
            entry = self._cache.get(key)
            if entry is None:
                return None
            self._cache[key] = entry.refreshed(now, self._ttl)
            return entry.cached

    async def set(self, key: str, value: CachedValue) -> bool:
        """Store a value, overwriting any prior entry.

        Args:
            key: The cache key.
            value: The value to store.

        Returns:
            Always True.
        """
        self._ensure_pruner()
        async with self._lock:
            self._cache[key] = CacheEntry.create(value, self._timer(), self._ttl)
        return True

    async def delete(self, key: str) -> bool:
        """Delete a cached value.

        Args:
            key: The cache key to delete.

        Returns:
            Always True, whether or not the key existed.
        """
        async with self._lock:
            self._cache.pop(key, None)
        return True

    async def hash(self, token: str) -> CachedValue:
        """Use an MD5 digest of the token as the cached value."""
        return CachedValue(digest(token), ValueKind.DIGEST)

    async def compare(self, cached: CachedValue, token: str) -> bool:
        """Compare a token against a digest, or against a bcrypt hash.

        Args:
            cached: A value produced by ``hash`` or a bcrypt hash.
            token: The plain-text token.

        Returns:
            True if the token matches.
        """
        if cached.kind is ValueKind.DIGEST:
            return hmac.compare_digest(digest(token), cached.value)
        return await self._hasher.compare(token, cached.value)

    async def prune(self) -> int:
        """Remove every expired entry.

        Returns:
            Number of entries removed.
        """
        async with self._lock:
            expired = self._cache.expire(self._timer())
        if expired:
            logger.debug("Pruned %d expired cache entries", len(expired))
        return len(expired)

    def start(self) -> None:
        """Start the background pruning task on the running loop."""
        if self._pruner is None or self._pruner.done():
            loop = asyncio.get_running_loop()
            self._pruner = loop.create_task(self._prune_periodically())

    async def close(self) -> None:
        """Cancel the background pruning task."""
        if self._pruner is None:
            return
        self._pruner.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._pruner
        self._pruner = None

    def _ensure_pruner(self) -> None:
        if self._pruner is None:
            self.start()

    async def _prune_periodically(self) -> None:
        while True:
            await asyncio.sleep(self._prune_interval)
            await self.prune()

    def __len__(self) -> int:
        """Return the number of live entries; expired ones are dropped first."""
        return len(self._cache)

    @property
    def ttl(self) -> float:
        """Return the entry lifetime in seconds."""
        return self._ttl

    async def __aenter__(self) -> "InMemoryCacheBackend":
        """Async context manager entry."""
        self.start()
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()
