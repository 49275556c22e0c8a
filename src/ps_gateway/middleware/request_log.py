"""Request logging middleware.

Logs every proxied call with method, path, status code, latency and a short
request ID. The ID goes into request.state (echoed in ApiResponse) and back
to the caller as X-Request-ID so a client-side failure can be matched to
the proxy log line.

Unhandled exceptions are turned into the 500 envelope here rather than by
Starlette's ServerErrorMiddleware, which sits outside this middleware and
would drop both the header and the log line.

Log format:
    INFO [POST] /api/v1/transactions/append → 200 (142ms) req_a1b2c3d4e5f6
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from src.ps_common.errors import InternalError
from src.ps_common.response import error_response

logger = logging.getLogger("ps.request")

REQUEST_ID_HEADER = "X-Request-ID"


def new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:12]}"


def internal_error_response(request: Request) -> JSONResponse:
    err = InternalError()
    resp = error_response(err.code, err.message, request)
    return JSONResponse(status_code=err.http_status, content=resp.model_dump())


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = new_request_id()
        request.state.request_id = request_id

        start = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception:
            logger.exception(
                "Unhandled error on %s %s %s", request.method, request.url.path, request_id
            )
            response = internal_error_response(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            "[%s] %s → %d (%.0fms) %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id,
        )
        return response
