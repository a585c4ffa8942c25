"""Redis cache backend implementation."""

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from redis.asyncio import Redis

from bcrypt_cache.core.entities.cache_entry import CachedValue, ValueKind
from bcrypt_cache.core.interfaces.password_hasher import IPasswordHasher
from bcrypt_cache.infrastructure.hashers.bcrypt import BcryptHasher

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RedisCacheBackend:
    """Redis cache backend for multi-process deployments.

    Expiration is delegated to Redis per-key TTLs. Values are low cost
    bcrypt hashes of the token, so whatever sits in the store stays
    irreversible even though it is cheap to verify.

    The client is supplied and owned by the caller; this backend only
    issues commands. Every command is bounded by ``timeout`` and raises
    on failure, leaving policy to the caching core.
    """

    def __init__(
        self,
        client: Redis,  # type: ignore[type-arg]
        hasher: IPasswordHasher | None = None,
        ttl: int = 600,
        key_prefix: str = "bcrypt-cache:",
        timeout: float = 0.25,
        cheap_rounds: int = 4,
    ) -> None:
        """Initialize the Redis cache backend.

        Args:
            client: A redis-py asyncio client.
            hasher: Hasher used for the cheap re-hash and its comparison.
            ttl: Seconds an entry lives after it was last written or read.
            key_prefix: Prefix for all cache keys.
            timeout: Upper bound in seconds for a single command.
            cheap_rounds: bcrypt work factor for cached values.
        """
        self._client = client
        self._hasher = hasher or BcryptHasher()
        self._ttl = ttl
        self._key_prefix = key_prefix
        self._timeout = timeout
        self._cheap_rounds = cheap_rounds
        self._pending: set[asyncio.Task[None]] = set()

    async def get(self, key: str) -> CachedValue | None:
        """Retrieve a cached value and restart its TTL.

        The TTL refresh runs in the background; its failure is logged
        and does not affect the returned value.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value, or None if not found or expired.

        Raises:
            TimeoutError: If Redis does not answer within the timeout.
            redis.exceptions.RedisError: If the command fails.
        """
        name = self._prefixed_key(key)
        result = await self._bounded(self._client.get(name))
        if not result:
            return None

        task = asyncio.get_running_loop().create_task(self._refresh_expiry(name))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

        if isinstance(result, bytes):
            result = result.decode("utf-8")
        return CachedValue(result, ValueKind.HASH)

    async def set(self, key: str, value: CachedValue) -> bool:
        """Store a value with the configured TTL in a single command.

        Args:
            key: The cache key.
            value: The value to store.

        Returns:
            True if Redis acknowledged the write.
        """
        result = await self._bounded(
            self._client.setex(self._prefixed_key(key), self._ttl, value.value)
        )
        return bool(result)

    async def delete(self, key: str) -> bool:
        """Delete a cached value.

        Args:
            key: The cache key to delete.

        Returns:
            Always True; deleting an absent key is not an error.
        """
        await self._bounded(self._client.delete(self._prefixed_key(key)))
        return True

    async def hash(self, token: str) -> CachedValue:
        """Create a low work factor bcrypt hash that's faster to compare."""
        hashed = await self._hasher.hash(token, self._cheap_rounds)
        return CachedValue(hashed, ValueKind.HASH)

    async def compare(self, cached: CachedValue, token: str) -> bool:
        """Compare a token against a cached bcrypt hash."""
        return await self._hasher.compare(token, cached.value)

    async def drain(self) -> None:
        """Wait for background TTL refreshes to finish."""
        while self._pending:
            await asyncio.gather(*self._pending)

    async def close(self) -> None:
        """Wait for background TTL refreshes; the client stays open."""
        await self.drain()

    async def _refresh_expiry(self, name: str) -> None:
        try:
            await self._bounded(self._client.expire(name, self._ttl))
        except Exception:
            logger.warning("Error setting expiration for %s", name, exc_info=True)

    async def _bounded(self, command: Awaitable[T]) -> T:
        return await asyncio.wait_for(command, timeout=self._timeout)

    def _prefixed_key(self, key: str) -> str:
        """Add the configured prefix to a key.

        Args:
            key: The cache key.

        Returns:
            The key with prefix.
        """
        return f"{self._key_prefix}{key}"

    @property
    def key_prefix(self) -> str:
        """Return the key prefix."""
        return self._key_prefix
