"""Cache configuration entity."""

from dataclasses import dataclass

# bcrypt accepts work factors in this range
MIN_ROUNDS = 4
MAX_ROUNDS = 31


@dataclass(frozen=True)
class CacheConfig:
    """Cache configuration.

    Options shared by the caching core and its backends. Options that
    only apply to one backend are ignored by the other.

    Attributes:
        ttl: Seconds an entry lives after it was last written or read.
        prune_interval: Seconds between scans for expired entries
            (in-memory backend only).
        key_prefix: Prefix prepended to keys in the store (Redis backend only).
        timeout: Upper bound in seconds for a single store operation.
        cheap_rounds: bcrypt work factor used for cached re-hashes.
    """

    ttl: int = 600
    prune_interval: float = 60.0
    key_prefix: str = "bcrypt-cache:"
    timeout: float = 0.25
    cheap_rounds: int = MIN_ROUNDS

    def __post_init__(self) -> None:
        """Validate option ranges."""
        if self.ttl <= 0:
            raise ValueError(f"ttl must be positive, got {self.ttl}")
        if self.prune_interval <= 0:
            raise ValueError(
                f"prune_interval must be positive, got {self.prune_interval}"
            )
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if not MIN_ROUNDS <= self.cheap_rounds <= MAX_ROUNDS:
            raise ValueError(
                f"cheap_rounds must be between {MIN_ROUNDS} and {MAX_ROUNDS}, "
                f"got {self.cheap_rounds}"
            )
