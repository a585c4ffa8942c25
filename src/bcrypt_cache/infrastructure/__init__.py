"""Infrastructure layer implementations for bcrypt_cache."""

from bcrypt_cache.infrastructure.backends import (
    InMemoryCacheBackend,
    RedisCacheBackend,
)
from bcrypt_cache.infrastructure.hashers import BcryptHasher

__all__ = [
    "BcryptHasher",
    "InMemoryCacheBackend",
    "RedisCacheBackend",
]
