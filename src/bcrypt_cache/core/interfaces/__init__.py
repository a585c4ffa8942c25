"""Core interfaces (Protocol classes) for bcrypt_cache."""

from bcrypt_cache.core.interfaces.cache_backend import ICacheBackend
from bcrypt_cache.core.interfaces.password_hasher import IPasswordHasher

__all__ = [
    "ICacheBackend",
    "IPasswordHasher",
]
