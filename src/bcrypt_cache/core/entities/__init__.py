"""Domain entities for bcrypt_cache."""

from bcrypt_cache.core.entities.cache_config import CacheConfig
from bcrypt_cache.core.entities.cache_entry import CachedValue, CacheEntry, ValueKind
from bcrypt_cache.core.entities.cache_key import CacheKey

__all__ = [
    "CacheConfig",
    "CacheEntry",
    "CacheKey",
    "CachedValue",
    "ValueKind",
]
