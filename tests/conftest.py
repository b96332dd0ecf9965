# tests/conftest.py
import os

# create_app を import する前にテスト用の環境へ
os.environ["TESTING"] = "1"
os.environ["APP_ENV"] = "test"
os.environ["SENTRY_DSN"] = ""
os.environ.setdefault("LOG_FORMAT", "json")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.main import create_app
from app.models import Base
from app.repositories.key_value import InMemoryKeyValueStore
from app.repositories.memory import InMemoryCatalogRepository, KeyValueAccountRepository
from app.services.catalog import CatalogService
from app.services.identity import IdentityService, SessionStore

SQLITE_URL = "sqlite+aiosqlite:///:memory:"


def make_settings(**overrides) -> Settings:
    # 待ち時間ゼロ、.env は読まない
    values = {
        "app_env": "test",
        "catalog_backend": "memory",
        "account_backend": "local",
        "kv_store_path": None,
        "payment_latency_seconds": 0.0,
        "chat_reply_delay_seconds": 0.0,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture(name="make_settings")
def _make_settings_fixture():
    return make_settings


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
async def app_client(settings):
    app = create_app(settings)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def signup(app_client):
    """Register a user through the API and return Authorization headers."""

    async def _signup(email: str = "farmer@example.com", password: str = "secret1") -> dict:
        res = await app_client.post(
            "/auth/signup",
            json={
                "name": "Ravi",
                "email": email,
                "password": password,
                "confirm_password": password,
            },
        )
        assert res.status_code == 201, res.text
        return {"Authorization": f"Bearer {res.json()['token']}"}

    return _signup


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def catalog(store) -> CatalogService:
    return CatalogService(InMemoryCatalogRepository(), store)


@pytest.fixture
def identity_service(store) -> IdentityService:
    return IdentityService(KeyValueAccountRepository(store), SessionStore(store))


# ==== SQLite (aiosqlite) for the SQLAlchemy repositories ====
@pytest_asyncio.fixture
async def engine():
    eng = create_async_engine(
        SQLITE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield eng
    finally:
        await eng.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
