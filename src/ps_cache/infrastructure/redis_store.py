"""RedisCacheStore: read-through cache for PocketSmith lookups.

Key layout:
    user:id                  -> "<id>"                        (SET ... EX ttl)
    user:{id}:accounts       -> hash {"data": "<json list>"}  (HSET + EXPIRE)
    user:{id}:categories     -> hash {"data": "<json list>"}  (HSET + EXPIRE)

Hash writes run HSET and EXPIRE inside one MULTI/EXEC so a collection is
never stored without its TTL. Redis failures never escape this module:
reads degrade to a miss, writes return False.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

import redis.asyncio as aioredis
from pydantic import ValidationError
from redis.exceptions import RedisError

from src.ps_ledger.domain.models import Category, TransactionAccount
from src.ps_ledger.infrastructure.schemas import (
    dump_accounts,
    dump_categories,
    parse_accounts,
    parse_categories,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 86400
USER_ID_KEY = "user:id"
DATA_FIELD = "data"


def accounts_key(user_id: int) -> str:
    return f"user:{user_id}:accounts"


def categories_key(user_id: int) -> str:
    return f"user:{user_id}:categories"


class RedisCacheStore:
    def __init__(self, redis: aioredis.Redis, ttl_seconds: int = DEFAULT_TTL_SECONDS) -> None:
        self._redis = redis
        self._ttl = ttl_seconds

    # ------------------------------------------------------------------
    # user:id
    # ------------------------------------------------------------------

    async def get_user_id(self) -> int | None:
        try:
            raw = await self._redis.get(USER_ID_KEY)
        except RedisError as e:
            logger.warning("Cache read failed for %s: %s", USER_ID_KEY, e)
            return None
        if raw is None:
            return None
        try:
            user_id = int(raw)
        except ValueError:
            logger.warning("Cache value for %s is not an integer: %r", USER_ID_KEY, raw)
            return None
        logger.info("Cache hit: %s = %d", USER_ID_KEY, user_id)
        return user_id

    async def set_user_id(self, user_id: int) -> bool:
        try:
            await self._redis.set(USER_ID_KEY, str(user_id), ex=self._ttl)
        except RedisError as e:
            logger.warning("Cache write failed for %s: %s", USER_ID_KEY, e)
            return False
        logger.info("Cache set: %s = %d (TTL: %d seconds)", USER_ID_KEY, user_id, self._ttl)
        return True

    # ------------------------------------------------------------------
    # collections
    # ------------------------------------------------------------------

    async def get_accounts(self, user_id: int) -> list[TransactionAccount] | None:
        return await self._get_collection(accounts_key(user_id), parse_accounts)

    async def set_accounts(self, user_id: int, accounts: list[TransactionAccount]) -> bool:
        return await self._set_collection(
            accounts_key(user_id), dump_accounts(accounts), len(accounts)
        )

    async def get_categories(self, user_id: int) -> list[Category] | None:
        return await self._get_collection(categories_key(user_id), parse_categories)

    async def set_categories(self, user_id: int, categories: list[Category]) -> bool:
        return await self._set_collection(
            categories_key(user_id), dump_categories(categories), len(categories)
        )

    async def _get_collection(
        self, key: str, parse: Callable[[str], list[T]]
    ) -> list[T] | None:
        try:
            raw = await self._redis.hget(key, DATA_FIELD)
        except RedisError as e:
            logger.warning("Cache read failed for %s: %s", key, e)
            return None
        if raw is None:
            # absent key, expired key and missing field all look the same
            return None
        try:
            items = parse(raw)
        except ValidationError as e:
            logger.warning("Cache payload for %s is unreadable, treating as miss: %s", key, e)
            return None
        logger.info("Cache hit: %s (%d items)", key, len(items))
        return items

    async def _set_collection(self, key: str, payload: str, count: int) -> bool:
        try:
            async with self._redis.pipeline(transaction=True) as pipe:
                pipe.hset(key, DATA_FIELD, payload)
                pipe.expire(key, self._ttl)
                await pipe.execute()
        except RedisError as e:
            logger.warning("Cache write failed for %s: %s", key, e)
            return False
        logger.info("Cache set: %s (%d items, TTL: %d seconds)", key, count, self._ttl)
        return True
