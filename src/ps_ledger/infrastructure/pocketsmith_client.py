"""PocketSmithClient: cache-aside reads and live writes against the ledger API.

Reads (me, transaction accounts, categories) check the cache store first
and only hit the network on a miss; a 200 response is written back before
returning. Any other status is an UpstreamError carrying the response body,
and nothing is cached. Transaction creation always goes to the API and
accepts 200 or 201.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

import httpx
from pydantic import ValidationError

from src.ps_cache.domain.repository import CacheStoreProtocol
from src.ps_common.errors import UpstreamError
from src.ps_ledger.domain.models import (
    Category,
    Fetched,
    PocketSmithTransaction,
    TransactionAccount,
    User,
)
from src.ps_ledger.infrastructure.schemas import (
    parse_accounts,
    parse_categories,
    parse_user,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_BASE_URL = "https://api.pocketsmith.com/v2"


class PocketSmithClient:
    def __init__(
        self,
        http: httpx.AsyncClient,
        api_key: str,
        cache: CacheStoreProtocol,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self._http = http
        self._api_key = api_key
        self._cache = cache
        self._base_url = base_url.rstrip("/")

    async def get_me(self) -> Fetched[User]:
        user_id = await self._cache.get_user_id()
        if user_id is not None:
            return Fetched(User(id=user_id), cached=True)

        logger.info("Cache miss for user ID, fetching from PocketSmith API")
        user = await self._fetch("/me", parse_user, "user")
        await self._cache.set_user_id(user.id)
        return Fetched(user, cached=False)

    async def get_accounts(self, user_id: int) -> Fetched[list[TransactionAccount]]:
        return await self._read_through(
            lambda: self._cache.get_accounts(user_id),
            lambda items: self._cache.set_accounts(user_id, items),
            f"/users/{user_id}/transaction_accounts",
            parse_accounts,
            f"transaction accounts (user {user_id})",
        )

    async def get_categories(self, user_id: int) -> Fetched[list[Category]]:
        return await self._read_through(
            lambda: self._cache.get_categories(user_id),
            lambda items: self._cache.set_categories(user_id, items),
            f"/users/{user_id}/categories",
            parse_categories,
            f"categories (user {user_id})",
        )

    async def create_transaction(
        self, account_id: int, transaction: PocketSmithTransaction
    ) -> None:
        path = f"/transaction_accounts/{account_id}/transactions"
        resp = await self._send("POST", path, json=transaction.to_payload())
        if resp.status_code not in (httpx.codes.OK, httpx.codes.CREATED):
            logger.error(
                "Failed to create transaction in account %d (status %d): %s",
                account_id, resp.status_code, resp.text,
            )
            raise UpstreamError(
                "PocketSmith request failed", resp.status_code, resp.text
            )
        logger.info("Created transaction in account %d", account_id)

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    async def _read_through(
        self,
        read_cache: Callable[[], Awaitable[list[T] | None]],
        write_cache: Callable[[list[T]], Awaitable[bool]],
        path: str,
        parse: Callable[[bytes], list[T]],
        what: str,
    ) -> Fetched[list[T]]:
        cached = await read_cache()
        if cached is not None:
            return Fetched(cached, cached=True)

        logger.info("Cache miss for %s, fetching from PocketSmith API", what)
        items = await self._fetch(path, parse, what)
        await write_cache(items)
        return Fetched(items, cached=False)

    async def _fetch(self, path: str, parse: Callable[[bytes], T], what: str) -> T:
        resp = await self._send("GET", path)
        if resp.status_code != httpx.codes.OK:
            logger.error(
                "Failed to fetch %s from PocketSmith API (status %d): %s",
                what, resp.status_code, resp.text,
            )
            raise UpstreamError(
                "PocketSmith request failed", resp.status_code, resp.text
            )
        try:
            return parse(resp.content)
        except ValidationError as e:
            logger.error("Unexpected %s payload from PocketSmith API: %s", what, e)
            raise UpstreamError(
                "PocketSmith returned an unreadable response", resp.status_code, resp.text
            ) from e

    async def _send(self, method: str, path: str, json: dict | None = None) -> httpx.Response:
        headers = {"accept": "application/json", "X-Developer-Key": self._api_key}
        try:
            return await self._http.request(
                method, f"{self._base_url}{path}", headers=headers, json=json
            )
        except httpx.HTTPError as e:
            logger.error("%s %s to PocketSmith failed: %s", method, path, e)
            raise UpstreamError(f"Could not reach PocketSmith: {e}") from e
