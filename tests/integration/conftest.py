"""Integration-test fixtures (require a running Redis at REDIS_URL).

Each test gets a fresh client with the test keys cleared before and after.
Tests are skipped when Redis is not reachable. Point REDIS_URL at a
scratch database: user:id is shared with a running proxy.
"""

import pytest
import pytest_asyncio
import redis.asyncio as aioredis
from redis.exceptions import RedisError

from config.settings import settings


@pytest_asyncio.fixture
async def live_redis() -> aioredis.Redis:
    client = aioredis.from_url(settings.REDIS_URL, decode_responses=True)
    try:
        await client.ping()
    except RedisError as e:
        await client.aclose()
        pytest.skip(f"Redis not reachable at {settings.REDIS_URL}: {e}")
    await client.delete("user:id", "user:9001:accounts", "user:9001:categories")
    yield client
    await client.delete("user:id", "user:9001:accounts", "user:9001:categories")
    await client.aclose()
