from __future__ import annotations

import time
import uuid
from collections.abc import Callable

import sentry_sdk
import structlog
from fastapi import Request, Response

REQUEST_ID_HEADER = "X-Request-ID"
_MAX_INBOUND_LENGTH = 128

logger = structlog.get_logger(__name__)


def _request_id(request: Request) -> str:
    inbound = (request.headers.get(REQUEST_ID_HEADER) or "").strip()
    if inbound and len(inbound) <= _MAX_INBOUND_LENGTH:
        return inbound
    return uuid.uuid4().hex


def _access_fields(request: Request, rid: str, status: int, start_ns: int) -> dict:
    return {
        "request_id": rid,
        "path": request.url.path,
        "method": request.method,
        "status": status,
        "duration_ms": round((time.perf_counter_ns() - start_ns) / 1_000_000.0, 3),
        "client_ip": (request.client.host if request.client else None) or "-",
    }


async def request_id_middleware(request: Request, call_next: Callable) -> Response:
    """Attach/propagate Request-ID and emit one ``http_request`` access log line.

    request_id, path and method are bound to contextvars so that service logs
    emitted while handling the request carry them too.
    """
    rid = _request_id(request)
    structlog.contextvars.bind_contextvars(
        request_id=rid, path=request.url.path, method=request.method
    )
    sentry_sdk.set_tag("request_id", rid)

    start_ns = time.perf_counter_ns()
    try:
        response = await call_next(request)
    except Exception:
        logger.error("http_request", **_access_fields(request, rid, 500, start_ns), exc_info=True)
        structlog.contextvars.clear_contextvars()
        raise

    logger.info("http_request", **_access_fields(request, rid, response.status_code, start_ns))
    response.headers[REQUEST_ID_HEADER] = rid
    structlog.contextvars.clear_contextvars()
    return response
