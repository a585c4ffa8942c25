"""Utility helpers for bcrypt_cache."""

from bcrypt_cache.utils.hashing import DIGEST_LENGTH, digest

__all__ = ["DIGEST_LENGTH", "digest"]
