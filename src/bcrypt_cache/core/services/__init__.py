"""Domain services for bcrypt_cache."""

from bcrypt_cache.core.services.bcrypt_cache import BcryptCache, WarnListener

__all__ = [
    "BcryptCache",
    "WarnListener",
]
