"""Service graph construction.

Backends (catalog, accounts, key-value storage) are chosen once here from
``Settings``; the rest of the application only sees the repository
interfaces.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.config import Settings
from app.db import configure_engine
from app.infra.unit_of_work import SqlAlchemyUnitOfWork
from app.repositories.database import DatabaseAccountRepository, DatabaseCatalogRepository
from app.repositories.fallback import FallbackCatalogRepository
from app.repositories.interfaces import AccountRepository, CatalogRepository, KeyValueStore
from app.repositories.key_value import FileKeyValueStore, InMemoryKeyValueStore
from app.repositories.memory import InMemoryCatalogRepository, KeyValueAccountRepository
from app.services.booking import BookingService
from app.services.catalog import CatalogService
from app.services.chat import ChatRegistry
from app.services.dashboard import DashboardService, OrderLedger
from app.services.identity import IdentityService, SessionStore
from app.services.payment import SimulatedPaymentGateway
from app.services.preferences import PreferenceService

SessionFactory = async_sessionmaker[AsyncSession]


@dataclass
class Services:
    settings: Settings
    store: KeyValueStore
    catalog: CatalogService
    identity: IdentityService
    booking: BookingService
    dashboard: DashboardService
    chat: ChatRegistry
    preferences: PreferenceService


def build_key_value_store(settings: Settings) -> KeyValueStore:
    if settings.kv_store_path:
        return FileKeyValueStore(settings.kv_store_path)
    return InMemoryKeyValueStore()


def _session_factory(settings: Settings, session_factory: SessionFactory | None) -> SessionFactory:
    if session_factory is not None:
        return session_factory
    if not settings.database_url:
        raise RuntimeError("DATABASE_URL is required when a database backend is selected")
    return configure_engine(settings.database_url)


def build_catalog_repository(
    settings: Settings, session_factory: SessionFactory | None = None
) -> CatalogRepository:
    if settings.catalog_backend == "memory":
        return InMemoryCatalogRepository()
    factory = _session_factory(settings, session_factory)
    remote = DatabaseCatalogRepository(lambda: SqlAlchemyUnitOfWork(factory))
    if settings.catalog_fallback_enabled:
        return FallbackCatalogRepository(remote, InMemoryCatalogRepository())
    return remote


def build_account_repository(
    settings: Settings,
    store: KeyValueStore,
    session_factory: SessionFactory | None = None,
) -> AccountRepository:
    if settings.account_backend == "local":
        return KeyValueAccountRepository(store)
    factory = _session_factory(settings, session_factory)
    return DatabaseAccountRepository(lambda: SqlAlchemyUnitOfWork(factory))


def build_services(
    settings: Settings,
    *,
    store: KeyValueStore | None = None,
    session_factory: SessionFactory | None = None,
) -> Services:
    store = store if store is not None else build_key_value_store(settings)
    catalog = CatalogService(build_catalog_repository(settings, session_factory), store)
    gateway = SimulatedPaymentGateway(
        latency_seconds=settings.payment_latency_seconds,
        currency=settings.currency,
        production=settings.app_env == "prod",
    )
    ledger = OrderLedger(store)

    structlog.get_logger(__name__).info(
        "services_configured",
        catalog_backend=settings.catalog_backend,
        catalog_fallback=settings.catalog_fallback_enabled,
        account_backend=settings.account_backend,
        kv_store="file" if settings.kv_store_path else "memory",
    )
    return Services(
        settings=settings,
        store=store,
        catalog=catalog,
        identity=IdentityService(
            build_account_repository(settings, store, session_factory), SessionStore(store)
        ),
        booking=BookingService(catalog, gateway, ledger),
        dashboard=DashboardService(ledger, catalog),
        chat=ChatRegistry(
            reply_delay_seconds=settings.chat_reply_delay_seconds,
            max_conversations=settings.chat_max_conversations,
        ),
        preferences=PreferenceService(store),
    )
