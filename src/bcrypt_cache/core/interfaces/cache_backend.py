"""Cache backend interface."""

from typing import Protocol

from bcrypt_cache.core.entities.cache_entry import CachedValue


class ICacheBackend(Protocol):
    """Contract for cache storage backends.

    All cache backends must implement this protocol to be used with
    BcryptCache. Storage methods only store and fetch; they do not apply
    any policy, and they may raise on failure. Each backend also provides
    the strategy used to turn a token into a cached value and to compare a
    token against one.
    """

    async def get(self, key: str) -> CachedValue | None:
        """Retrieve a cached value and restart its lifetime.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value, or None if not found or expired.
        """
        ...

    async def set(self, key: str, value: CachedValue) -> bool:
        """Store a value for the configured TTL, overwriting any prior value.

        Args:
            key: The cache key.
            value: The value to store.

        Returns:
            True if the store acknowledged the write.
        """
        ...

    async def delete(self, key: str) -> bool:
        """Delete a cached value.

        Deleting an absent key is not an error.

        Args:
            key: The cache key to delete.

        Returns:
            True once the key is gone.
        """
        ...

    async def hash(self, token: str) -> CachedValue:
        """Produce the cheap value stored in place of a plain-text token."""
        ...

    async def compare(self, cached: CachedValue, token: str) -> bool:
        """Check a plain-text token against a value produced by ``hash``."""
        ...

    async def close(self) -> None:
        """Stop background work owned by the backend."""
        ...
