"""Cache key value object."""

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class CacheKey:
    """Immutable cache key derived from an authoritative hash.

    Only the fingerprint is kept, so the store never holds the bytes
    of the credential artifact itself.
    """

    fingerprint: str

    def __str__(self) -> str:
        """Return the key string used by backends."""
        return self.fingerprint

    @classmethod
    def from_hash(
        cls,
        hashed: str,
        hash_func: Callable[[str], str] | None = None,
    ) -> "CacheKey":
        """Create a CacheKey from an authoritative hash.

        Args:
            hashed: The authoritative (full cost) hash string.
            hash_func: Optional custom fingerprint function.

        Returns:
            A new CacheKey instance.

        Raises:
            ValueError: If the fingerprint equals the input hash.
        """
        from bcrypt_cache.utils.hashing import digest

        hasher = hash_func or digest
        fingerprint = hasher(hashed)
        if fingerprint == hashed:
            raise ValueError("Cache key must not equal the authoritative hash")
        return cls(fingerprint=fingerprint)
