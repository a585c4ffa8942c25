"""Construction of a BcryptCache from configuration."""

from typing import Any

from bcrypt_cache.core.entities.cache_config import CacheConfig
from bcrypt_cache.core.interfaces.cache_backend import ICacheBackend
from bcrypt_cache.core.interfaces.password_hasher import IPasswordHasher
from bcrypt_cache.core.services.bcrypt_cache import BcryptCache, WarnListener
from bcrypt_cache.infrastructure.backends.memory import InMemoryCacheBackend
from bcrypt_cache.infrastructure.backends.redis import RedisCacheBackend
from bcrypt_cache.infrastructure.hashers.bcrypt import BcryptHasher


def create_cache(
    config: CacheConfig | None = None,
    client: Any | None = None,
    hasher: IPasswordHasher | None = None,
    on_warn: WarnListener | None = None,
) -> BcryptCache:
    """Build a BcryptCache for the given configuration.

    A Redis backend is used when a client is supplied, otherwise the
    in-memory backend.

    Args:
        config: Cache configuration. Uses defaults if not provided.
        client: Optional redis-py asyncio client.
        hasher: Authoritative password hasher. Defaults to bcrypt.
        on_warn: Optional listener for cache layer failures.

    Returns:
        A configured BcryptCache.

    Example:
        cache = create_cache(CacheConfig(ttl=300), client=Redis())
        if await cache.compare(user.password_hash, password):
            ...
    """
    config = config or CacheConfig()
    hasher = hasher or BcryptHasher()

    backend: ICacheBackend
    if client is not None:
        backend = RedisCacheBackend(
            client,
            hasher=hasher,
            ttl=config.ttl,
            key_prefix=config.key_prefix,
            timeout=config.timeout,
            cheap_rounds=config.cheap_rounds,
        )
    else:
        backend = InMemoryCacheBackend(
            ttl=config.ttl,
            prune_interval=config.prune_interval,
            hasher=hasher,
        )

    return BcryptCache(backend=backend, hasher=hasher, on_warn=on_warn)
