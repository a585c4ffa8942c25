"""Pytest configuration for bcrypt_cache tests."""

import bcrypt
import pytest

from bcrypt_cache import BcryptHasher


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingHasher:
    """BcryptHasher that records every call."""

    def __init__(self) -> None:
        self._inner = BcryptHasher()
        self.hash_calls: list[int] = []
        self.compare_calls: list[str] = []

    async def hash(self, value: str, rounds: int) -> str:
        self.hash_calls.append(rounds)
        return await self._inner.hash(value, rounds)

    async def compare(self, value: str, hashed: str) -> bool:
        self.compare_calls.append(hashed)
        return await self._inner.compare(value, hashed)


class FakeRedis:
    """Dict backed stand-in for the redis.asyncio commands the backend uses."""

    def __init__(self) -> None:
        self.store: dict[str, bytes] = {}
        self.ttls: dict[str, int] = {}

    async def get(self, name: str) -> bytes | None:
        return self.store.get(name)

    async def setex(self, name: str, time: int, value: str) -> bool:
        self.store[name] = value.encode()
        self.ttls[name] = time
        return True

    async def delete(self, *names: str) -> int:
        count = 0
        for name in names:
            if self.store.pop(name, None) is not None:
                self.ttls.pop(name, None)
                count += 1
        return count

    async def expire(self, name: str, time: int) -> bool:
        if name not in self.store:
            return False
        self.ttls[name] = time
        return True


@pytest.fixture(scope="session")
def token() -> str:
    """The plain-text token used across tests."""
    return "mytoken"


@pytest.fixture(scope="session")
def hashed(token: str) -> str:
    """An authoritative bcrypt hash of ``token``."""
    salt = bcrypt.gensalt(rounds=4, prefix=b"2a")
    return bcrypt.hashpw(token.encode(), salt).decode()


@pytest.fixture
def clock() -> FakeClock:
    """A controllable clock."""
    return FakeClock()


@pytest.fixture
def counting_hasher() -> CountingHasher:
    """A hasher that records its calls."""
    return CountingHasher()


@pytest.fixture
def fake_redis() -> FakeRedis:
    """An in-process Redis stand-in."""
    return FakeRedis()
