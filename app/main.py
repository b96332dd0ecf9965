import os
from contextlib import asynccontextmanager

import sentry_sdk
import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sentry_sdk.integrations.starlette import StarletteIntegration
from slowapi.errors import RateLimitExceeded
from starlette.middleware.cors import CORSMiddleware

from app.api import errors
from app.api.routers import auth, bookings, chat, dashboard, equipment, healthz, preferences
from app.core.config import Settings, get_settings
from app.db import dispose_engine
from app.infra.providers import build_services
from app.logging import setup_logging
from app.middleware.rate_limit import rate_limit_middleware
from app.middleware.request_id import request_id_middleware
from app.middleware.security_headers import security_headers_middleware

DEFAULT_ALLOW_ORIGINS = ("http://localhost:3000",)
# dev only
LOCAL_DEV_ORIGINS = ("http://127.0.0.1:3000", "http://localhost:5173")


def _init_sentry(env: str) -> None:
    dsn = os.getenv("SENTRY_DSN")
    if not dsn:
        return
    # traces_sample_rate: clamp to [0.0, 0.2]
    try:
        rate_raw = float(os.getenv("SENTRY_TRACES_RATE", "0"))
    except ValueError:
        rate_raw = 0.0
    sentry_sdk.init(
        dsn=dsn,
        environment=env,
        release=os.getenv("RELEASE"),
        integrations=[StarletteIntegration()],
        traces_sample_rate=max(0.0, min(0.2, rate_raw)),
        send_default_pii=False,
    )


def _allow_origins(env: str) -> list[str]:
    raw = os.getenv("ALLOW_ORIGINS")
    if raw is None:
        if env == "prod":
            return list(DEFAULT_ALLOW_ORIGINS)
        return [*DEFAULT_ALLOW_ORIGINS, *LOCAL_DEV_ORIGINS]
    return [o.strip() for o in raw.split(",") if o.strip()]


@asynccontextmanager
async def _lifespan(_: FastAPI):
    yield
    await dispose_engine()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    # Initialize structured logging first
    setup_logging()
    _init_sentry(settings.app_env)

    app = FastAPI(title="Krishi Sadhan API", lifespan=_lifespan)
    app.state.services = build_services(settings)

    # Request-ID middleware (JSON access log)
    app.middleware("http")(request_id_middleware)
    app.middleware("http")(security_headers_middleware)
    # Rate limiting (IP-based, method-specific)
    app.middleware("http")(rate_limit_middleware)

    allow_origins = _allow_origins(settings.app_env)
    if allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allow_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "HEAD"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID"],
        )

    errors.install(app)

    app.include_router(equipment.router)
    app.include_router(auth.router)
    app.include_router(bookings.router)
    app.include_router(dashboard.router)
    app.include_router(chat.router)
    app.include_router(preferences.router)
    app.include_router(healthz.router)

    # Debug-only endpoint to raise an error (disabled in prod)
    if settings.app_env != "prod":

        @app.get("/debug/error", include_in_schema=False)
        def debug_error():  # pragma: no cover - behavior verified by 404 in prod test
            raise RuntimeError("intentional error for Sentry debug")

    @app.exception_handler(RateLimitExceeded)
    async def _rate_limit_handler(request: Request, exc: RateLimitExceeded):  # type: ignore[unused-ignore]
        info = getattr(request.state, "rate_limit_info", None) or {
            "method": request.method,
            "ip": (request.client.host if request.client else None) or "-",
            "limit": "-",
        }
        return JSONResponse(
            status_code=429,
            content={"error": {"code": "rate_limited", "message": "Too Many Requests", "detail": info}},
        )

    structlog.get_logger(__name__).info(
        "app_startup",
        env=settings.app_env,
        catalog_backend=settings.catalog_backend,
        account_backend=settings.account_backend,
    )
    return app


app = create_app()
