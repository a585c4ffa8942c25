"""bcrypt-cache - Memoized verification for slow password hashes.

Verifying a token against a bcrypt hash is deliberately expensive. This
library remembers successful verifications behind a much cheaper check,
without ever weakening the result of the original comparison: a failed
comparison is never cached, and any malfunction of the cache degrades
to the authoritative bcrypt check.

Example with the in-memory backend:
    from bcrypt_cache import BcryptCache, BcryptHasher, InMemoryCacheBackend

    hasher = BcryptHasher()
    cache = BcryptCache(
        backend=InMemoryCacheBackend(ttl=600, prune_interval=60),
        hasher=hasher,
    )

    ok = await cache.compare(user.password_hash, password)

Example with Redis:
    from redis.asyncio import Redis
    from bcrypt_cache import CacheConfig, create_cache

    cache = create_cache(
        CacheConfig(ttl=300, key_prefix="myapp:bcrypt:"),
        client=Redis.from_url("redis://localhost:6379"),
        on_warn=lambda error, cause: metrics.incr("bcrypt_cache.warn"),
    )
"""

from bcrypt_cache.core.entities import (
    CacheConfig,
    CachedValue,
    CacheEntry,
    CacheKey,
    ValueKind,
)
from bcrypt_cache.core.errors import (
    CacheError,
    CacheLookupError,
    CacheRemoveError,
    CacheWriteError,
    MissingParameterError,
)
from bcrypt_cache.core.interfaces import ICacheBackend, IPasswordHasher
from bcrypt_cache.core.services import BcryptCache, WarnListener
from bcrypt_cache.factory import create_cache
from bcrypt_cache.infrastructure import (
    BcryptHasher,
    InMemoryCacheBackend,
    RedisCacheBackend,
)
from bcrypt_cache.utils.hashing import digest

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheConfig",
    "CacheEntry",
    "CacheKey",
    "CachedValue",
    "ValueKind",
    # Errors
    "CacheError",
    "CacheLookupError",
    "CacheRemoveError",
    "CacheWriteError",
    "MissingParameterError",
    # Core interfaces
    "ICacheBackend",
    "IPasswordHasher",
    # Core services
    "BcryptCache",
    "WarnListener",
    # Infrastructure implementations
    "BcryptHasher",
    "InMemoryCacheBackend",
    "RedisCacheBackend",
    # Helpers
    "create_cache",
    "digest",
]
