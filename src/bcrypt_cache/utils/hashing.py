"""Hashing utilities for cache key and cached value generation."""

import hashlib

DIGEST_LENGTH = 32


def digest(value: str) -> str:
    """Create a fast, deterministic fingerprint of a string.

    The fingerprint is not a security boundary. It is used to derive
    cache keys from authoritative hashes and, in the in-memory backend,
    as a cheap stand-in for the token itself.

    Args:
        value: The string to fingerprint.

    Returns:
        A 32 character hexadecimal MD5 digest.
    """
    return hashlib.md5(value.encode(), usedforsecurity=False).hexdigest()
