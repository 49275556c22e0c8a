"""Shared test fixtures."""

# ruff: noqa: E402  -- settings are read at import time

import os

os.environ.setdefault("POCKETSMITH_API_KEY", "test-developer-key")
os.environ.setdefault("CLIENT_AUTH_KEY", "test-client-key")

from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from redis.exceptions import ConnectionError as RedisConnectionError

from src.main import app


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class FakeRedis:
    """In-memory stand-in for the redis.asyncio calls RedisCacheStore makes.

    Time only moves when a test calls ``advance``.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self.down = False
        self.data: dict[str, Any] = {}
        self.expires_at: dict[str, float] = {}

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def ttl(self, key: str) -> float | None:
        if key not in self.expires_at:
            return None
        return self.expires_at[key] - self.now

    def _check(self) -> None:
        if self.down:
            raise RedisConnectionError("Connection refused")

    def _alive(self, key: str) -> bool:
        expiry = self.expires_at.get(key)
        if expiry is not None and expiry <= self.now:
            self.data.pop(key, None)
            self.expires_at.pop(key, None)
        return key in self.data

    async def get(self, key: str) -> str | None:
        self._check()
        return self.data[key] if self._alive(key) else None

    async def set(self, key: str, value: str, ex: int | None = None) -> bool:
        self._check()
        self.data[key] = value
        if ex is not None:
            self.expires_at[key] = self.now + ex
        return True

    async def hget(self, key: str, field: str) -> str | None:
        self._check()
        if not self._alive(key):
            return None
        return self.data[key].get(field)

    def pipeline(self, transaction: bool = True) -> "FakePipeline":
        return FakePipeline(self)


class FakePipeline:
    def __init__(self, redis: FakeRedis) -> None:
        self._redis = redis
        self._ops: list[tuple[Any, ...]] = []

    async def __aenter__(self) -> "FakePipeline":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self._ops.clear()

    def hset(self, key: str, field: str, value: str) -> "FakePipeline":
        self._ops.append(("hset", key, field, value))
        return self

    def expire(self, key: str, seconds: int) -> "FakePipeline":
        self._ops.append(("expire", key, seconds))
        return self

    async def execute(self) -> list[Any]:
        # all-or-nothing, like MULTI/EXEC
        self._redis._check()
        results: list[Any] = []
        for op in self._ops:
            if op[0] == "hset":
                _, key, field, value = op
                self._redis._alive(key)
                self._redis.data.setdefault(key, {})[field] = value
                results.append(1)
            else:
                _, key, seconds = op
                self._redis.expires_at[key] = self._redis.now + seconds
                results.append(True)
        return results


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()
