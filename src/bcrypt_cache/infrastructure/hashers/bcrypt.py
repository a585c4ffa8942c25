"""bcrypt password hasher implementation."""

import asyncio

import bcrypt


class BcryptHasher:
    """Async wrapper around the bcrypt library.

    bcrypt is CPU bound by design, so each call runs in the loop's
    default executor instead of blocking the event loop.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the hasher.

        Args:
            encoding: Character encoding used for values and hashes.
        """
        self._encoding = encoding

    async def hash(self, value: str, rounds: int) -> str:
        """Hash a plain-text value with the given work factor."""
        loop = asyncio.get_running_loop()
        salt = bcrypt.gensalt(rounds=rounds)
        hashed = await loop.run_in_executor(
            None,
            bcrypt.hashpw,
            value.encode(self._encoding),
            salt,
        )
        return hashed.decode(self._encoding)

    async def compare(self, value: str, hashed: str) -> bool:
        """Check a plain-text value against a bcrypt hash.

        Raises:
            ValueError: If ``hashed`` is not a valid bcrypt hash.
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None,
            bcrypt.checkpw,
            value.encode(self._encoding),
            hashed.encode(self._encoding),
        )
