"""Core domain layer for bcrypt_cache."""

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
from bcrypt_cache.core.services import BcryptCache

__all__ = [
    # Entities
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
    # Interfaces
    "ICacheBackend",
    "IPasswordHasher",
    # Services
    "BcryptCache",
]
