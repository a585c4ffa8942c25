"""Cache backend implementations."""

from bcrypt_cache.infrastructure.backends.memory import InMemoryCacheBackend
from bcrypt_cache.infrastructure.backends.redis import RedisCacheBackend

__all__ = [
    "InMemoryCacheBackend",
    "RedisCacheBackend",
]
