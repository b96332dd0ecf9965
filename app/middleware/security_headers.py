from __future__ import annotations

from collections.abc import Callable

from fastapi import Request, Response

# Responses carrying session tokens or personal order data
_PRIVATE_PREFIXES = ("/auth", "/dashboard", "/bookings")


async def security_headers_middleware(request: Request, call_next: Callable) -> Response:
    """Attach basic security headers to every response.

    Session and dashboard responses are additionally marked ``no-store``.
    """
    response = await call_next(request)
    headers = response.headers
    headers.setdefault("X-Content-Type-Options", "nosniff")
    headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
    headers.setdefault("X-Frame-Options", "DENY")
    if request.url.path.startswith(_PRIVATE_PREFIXES):
        headers.setdefault("Cache-Control", "no-store")
    return response
