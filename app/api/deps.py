"""API dependency helpers and service providers."""

from fastapi import Header, Request

from app.infra.providers import Services
from app.services.booking import BookingService
from app.services.catalog import CatalogService
from app.services.chat import ChatRegistry
from app.services.dashboard import DashboardService
from app.services.identity import Identity, IdentityService
from app.services.preferences import PreferenceService

__all__ = [
    "get_bearer_token",
    "get_booking_service",
    "get_catalog_service",
    "get_chat_registry",
    "get_current_identity",
    "get_dashboard_service",
    "get_identity_service",
    "get_preference_service",
]


def _services(request: Request) -> Services:
    return request.app.state.services


def get_bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """
    Authorization: Bearer <token> からトークンを取り出す（無ければ None）
    """
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


# --- Service providers for DI ---


def get_catalog_service(request: Request) -> CatalogService:
    return _services(request).catalog


def get_identity_service(request: Request) -> IdentityService:
    return _services(request).identity


def get_booking_service(request: Request) -> BookingService:
    return _services(request).booking


def get_dashboard_service(request: Request) -> DashboardService:
    return _services(request).dashboard


def get_chat_registry(request: Request) -> ChatRegistry:
    return _services(request).chat


def get_preference_service(request: Request) -> PreferenceService:
    return _services(request).preferences


def get_current_identity(
    request: Request,
    authorization: str | None = Header(default=None),
) -> Identity | None:
    """Resolve the signed-in identity, or None when the session is absent/closed."""
    token = get_bearer_token(authorization)
    return _services(request).identity.current_identity(token)
