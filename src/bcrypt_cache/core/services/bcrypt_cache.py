"""Bcrypt cache - main orchestrator for cached password verification."""

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from bcrypt_cache.core.entities.cache_entry import CachedValue
from bcrypt_cache.core.entities.cache_key import CacheKey
from bcrypt_cache.core.errors import (
    CacheError,
    CacheLookupError,
    CacheRemoveError,
    CacheWriteError,
    MissingParameterError,
)
from bcrypt_cache.core.interfaces.cache_backend import ICacheBackend
from bcrypt_cache.core.interfaces.password_hasher import IPasswordHasher

logger = logging.getLogger(__name__)

WarnListener = Callable[[CacheError, BaseException | None], None]


class BcryptCache:
    """Domain service that memoizes successful password verifications.

    The cache is a pure performance optimization. Every failure inside
    the cache layer is reported as a warning and degrades to a cache miss,
    so accept/reject decisions are identical with or without a working
    backend. Only a failure of the authoritative hasher propagates.
    """

    def __init__(
        self,
        backend: ICacheBackend,
        hasher: IPasswordHasher,
        on_warn: WarnListener | None = None,
    ) -> None:
        """Initialize the bcrypt cache.

        Args:
            backend: The cache backend to use for storage.
            hasher: The authoritative (slow) password hasher.
            on_warn: Optional listener called with an error and its cause
                whenever a cache operation fails.
        """
        self._backend = backend
        self._hasher = hasher
        self._on_warn = on_warn
        self._pending: set[asyncio.Task[bool]] = set()

        # Statistics
        self._hits = 0
        self._misses = 0

    @property
    def backend(self) -> ICacheBackend:
        """Get the cache backend."""
        return self._backend

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, and total comparisons.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "total": self._hits + self._misses,
        }

    async def get(self, hashed: str) -> str | None:
        """Get the cached value stored for an authoritative hash.

        Args:
            hashed: The authoritative hash string.

        Returns:
            The cached value, or None on a miss or a failed lookup.
        """
        cached = await self._lookup(hashed)
        return cached.value if cached is not None else None

    async def set(self, hashed: str | None, token: str | None) -> bool:
        """Cache a cheap re-hash of a token that matched ``hashed``.

        Args:
            hashed: The authoritative hash string.
            token: The plain-text token that matched it.

        Returns:
            True if the backend stored the value.
        """
        if hashed is None or token is None:
            self._warn(MissingParameterError("Missing parameter(s)"))
            return False

        try:
            value = await self._backend.hash(token)
            return await self._backend.set(str(CacheKey.from_hash(hashed)), value)
        except Exception as e:
            self._warn(CacheWriteError("Failed to add hash to the cache"), e)
            return False

    async def remove(self, hashed: str) -> bool:
        """Remove the cached value for an authoritative hash.

        Args:
            hashed: The authoritative hash string.

        Returns:
            True if the entry is gone, False if the backend failed.
        """
        try:
            return await self._backend.delete(str(CacheKey.from_hash(hashed)))
        except Exception as e:
            self._warn(CacheRemoveError("Failed to remove hash from the cache"), e)
            return False

    async def compare(self, hashed: str, token: str) -> bool:
        """Verify a plain-text token against an authoritative hash.

        A cache hit is trusted and answered with the backend's cheap
        comparison. Otherwise the authoritative comparison runs, and a
        successful result is cached in the background. Failed comparisons
        are never cached.

        Args:
            hashed: The authoritative hash string.
            token: The plain-text token to verify.

        Returns:
            True if the token matches.

        Raises:
            ValueError: If the authoritative hasher rejects ``hashed``.
        """
        cached = await self._lookup(hashed)
        if cached is not None:
            try:
                result = await self._backend.compare(cached, token)
            except Exception as e:
                self._warn(CacheLookupError("Failed to compare cached value"), e)
            else:
                self._hits += 1
                logger.debug("Cache hit (match=%s)", result)
                return result

        self._misses += 1
        logger.debug("Cache miss, running authoritative comparison")
        result = await self._hasher.compare(token, hashed)
        if result:
            self._spawn(self.set(hashed, token))
        return result

    async def drain(self) -> None:
        """Wait for background cache population to finish."""
        while self._pending:
            await asyncio.gather(*self._pending)

    async def close(self) -> None:
        """Finish background population and release the backend."""
        await self.drain()
        await self._backend.close()

    def _spawn(self, coro: Coroutine[Any, Any, bool]) -> None:
        task = asyncio.get_running_loop().create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _lookup(self, hashed: str) -> CachedValue | None:
        try:
            return await self._backend.get(str(CacheKey.from_hash(hashed)))
        except Exception as e:
            self._warn(CacheLookupError("Failed to get data from the cache"), e)
            return None

    def _warn(self, error: CacheError, cause: BaseException | None = None) -> None:
        logger.warning("%s", error, exc_info=cause)
        if self._on_warn is None:
            return
        try:
            self._on_warn(error, cause)
        except Exception:
            logger.exception("Cache warning listener failed")
