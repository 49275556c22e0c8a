"""Service wiring for the routers.

Overridable through ``app.dependency_overrides[get_transaction_service]``.
"""

from config.settings import settings
from src.ps_cache.infrastructure.redis_store import RedisCacheStore
from src.ps_common.http_client import get_http_client
from src.ps_common.redis_client import get_redis
from src.ps_ledger.infrastructure.pocketsmith_client import PocketSmithClient
from src.ps_transaction.application.service import TransactionService


async def get_transaction_service() -> TransactionService:
    cache = RedisCacheStore(await get_redis(), ttl_seconds=settings.CACHE_TTL_SECONDS)
    client = PocketSmithClient(
        http=await get_http_client(),
        api_key=settings.POCKETSMITH_API_KEY,
        cache=cache,
        base_url=settings.POCKETSMITH_BASE_URL,
    )
    return TransactionService(client, routing_mode=settings.ROUTING_MODE)
