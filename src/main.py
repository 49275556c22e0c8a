"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError

from config.settings import settings
from src.ps_common.enums import ErrorKind
from src.ps_common.errors import AppError
from src.ps_common.http_client import close_http_client
from src.ps_common.redis_client import close_redis, get_redis
from src.ps_common.response import error_response
from src.ps_gateway.api.router import router as proxy_router
from src.ps_gateway.middleware.request_log import RequestLogMiddleware

logger = logging.getLogger(__name__)

# Lookup misses are the caller's fault; everything past the adapter is ours.
_STATUS_BY_KIND = {
    ErrorKind.LOOKUP: 400,
    ErrorKind.UPSTREAM: 502,
    ErrorKind.INTERNAL: 500,
}


def http_status_for(exc: AppError) -> int:
    if exc.kind is ErrorKind.REQUEST:
        return exc.http_status
    return _STATUS_BY_KIND[exc.kind]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: check Redis is reachable. Shutdown: close Redis + HTTP pools."""
    redis = await get_redis()
    try:
        await redis.ping()
    except RedisError as e:
        # the cache is best-effort, the proxy still works without it
        logger.warning("Redis unreachable at startup: %s", e)
    yield
    await close_http_client()
    await close_redis()


app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG,
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message, request)
    return JSONResponse(
        status_code=http_status_for(exc),
        content=resp.model_dump(),
    )


app.include_router(proxy_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}
