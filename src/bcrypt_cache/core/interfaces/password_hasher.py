"""Password hasher interface."""

from typing import Protocol


class IPasswordHasher(Protocol):
    """Contract for the slow, work-factor tunable password hash.

    Implementations must be safe to call concurrently from many pending
    operations, and must not block the event loop.
    """

    async def hash(self, value: str, rounds: int) -> str:
        """Hash a plain-text value.

        Args:
            value: The plain-text value.
            rounds: The work factor.

        Returns:
            The encoded hash string.
        """
        ...

    async def compare(self, value: str, hashed: str) -> bool:
        """Check a plain-text value against an encoded hash.

        Args:
            value: The plain-text value.
            hashed: A hash produced by ``hash``.

        Returns:
            True if the value matches.

        Raises:
            ValueError: If ``hashed`` is not a valid hash.
        """
        ...
