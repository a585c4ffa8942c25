"""Password hasher implementations."""

from bcrypt_cache.infrastructure.hashers.bcrypt import BcryptHasher

__all__ = ["BcryptHasher"]
