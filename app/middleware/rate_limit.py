from __future__ import annotations

import os
from collections.abc import Callable
from typing import TypedDict

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from limits import parse as parse_limit
from limits.storage import MemoryStorage
from limits.strategies import MovingWindowRateLimiter
from slowapi import Limiter


class RateLimitInfo(TypedDict, total=False):
    method: str
    ip: str
    limit: str


# slowapi provides the canonical RateLimitExceeded type handled in main;
# the per-method/per-path limits below use "limits" directly.
limiter = Limiter(key_func=lambda request: _client_ip(request))

_storage = MemoryStorage()
_rate = MovingWindowRateLimiter(_storage)

# 認証系は総当たり対策で厳しめ
_AUTH_PATHS = ("/auth/login", "/auth/signup", "/auth/forgot-password")
_AUTH_LIMIT = "10/minute"
# Chat replies are cheap but conversations are held in memory
_CHAT_WRITE_LIMIT = "20/minute"


def _client_ip(request: Request) -> str:
    # Prefer X-Forwarded-For if present (first hop), fall back to ASGI client
    xff = request.headers.get("x-forwarded-for")
    if xff:
        return xff.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "local"


def _enabled() -> bool:
    # Allow RATE_LIMIT_ENABLED=1 to force limits on even when TESTING.
    if os.getenv("RATE_LIMIT_ENABLED") in {"1", "true", "TRUE"}:
        return True
    if os.getenv("TESTING"):
        return False
    return True


def _limit_for(method: str, path: str) -> tuple[str, str] | None:
    """Return (bucket, limit) for a request, or None when it is not limited."""
    m = method.upper()
    if m == "POST" and path in _AUTH_PATHS:
        return "auth", _AUTH_LIMIT
    if m == "POST" and path.startswith("/chat/"):
        return "chat", _CHAT_WRITE_LIMIT
    if m in {"GET", "HEAD"}:
        return "read", "60/minute"
    if m in {"POST", "PUT", "DELETE"}:
        return "write", "30/minute"
    # OPTIONS (CORS preflight) is never limited
    return None


async def rate_limit_middleware(request: Request, call_next: Callable) -> Response:
    if not _enabled():
        return await call_next(request)

    rule = _limit_for(request.method, request.url.path)
    if rule is None:
        return await call_next(request)

    bucket, limit_str = rule
    key = f"ip:{_client_ip(request)}|b:{bucket}"
    if not _rate.hit(parse_limit(limit_str), key):
        info: RateLimitInfo = {
            "method": request.method.upper(),
            "ip": _client_ip(request),
            "limit": limit_str,
        }
        request.state.rate_limit_info = info
        return JSONResponse(
            status_code=429,
            content={
                "error": {
                    "code": "rate_limited",
                    "message": "Too Many Requests",
                    "detail": info,
                }
            },
        )

    response = await call_next(request)
    response.headers.setdefault("X-RateLimit-Limit", limit_str)
    return response


def reset() -> None:
    """Drop all recorded hits (used by tests)."""
    _storage.reset()
