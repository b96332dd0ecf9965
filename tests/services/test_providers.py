import pytest

from app.core.exceptions import ConflictError
from app.infra.providers import (
    build_account_repository,
    build_catalog_repository,
    build_key_value_store,
    build_services,
)
from app.infra.unit_of_work import SqlAlchemyUnitOfWork
from app.repositories.database import DatabaseCatalogRepository
from app.repositories.fallback import FallbackCatalogRepository
from app.repositories.fixtures import FIXTURE_EQUIPMENT
from app.repositories.key_value import FileKeyValueStore, InMemoryKeyValueStore
from app.repositories.memory import InMemoryCatalogRepository, KeyValueAccountRepository


def test_defaults_are_local(make_settings, store):
    settings = make_settings()
    assert isinstance(build_key_value_store(settings), InMemoryKeyValueStore)
    assert isinstance(build_catalog_repository(settings), InMemoryCatalogRepository)
    assert isinstance(build_account_repository(settings, store), KeyValueAccountRepository)


def test_file_store_when_path_given(make_settings, tmp_path):
    settings = make_settings(kv_store_path=str(tmp_path / "kv.json"))
    assert isinstance(build_key_value_store(settings), FileKeyValueStore)


def test_database_backend_requires_url(make_settings):
    with pytest.raises(RuntimeError):
        build_catalog_repository(make_settings(catalog_backend="database", database_url=None))


def test_database_catalog_is_wrapped_unless_fallback_disabled(make_settings, session_factory):
    wrapped = build_catalog_repository(
        make_settings(catalog_backend="database"), session_factory
    )
    assert isinstance(wrapped, FallbackCatalogRepository)
    bare = build_catalog_repository(
        make_settings(catalog_backend="database", catalog_fallback_enabled=False),
        session_factory,
    )
    assert isinstance(bare, DatabaseCatalogRepository)


@pytest.mark.asyncio
async def test_services_over_database_backends(make_settings, session_factory):
    async with SqlAlchemyUnitOfWork(session_factory) as uow:
        await uow.equipment.insert(FIXTURE_EQUIPMENT[:2])

    settings = make_settings(catalog_backend="database", account_backend="database")
    services = build_services(settings, session_factory=session_factory)
    assert [r.id for r in await services.catalog.list()] == ["1", "2"]

    session = await services.identity.sign_up(email="a@b.co", password="secret1", name="Ravi")
    again = await services.identity.sign_in(email="a@b.co", password="secret1")
    assert again.identity.id == session.identity.id

    # the accounts table enforces unique emails
    with pytest.raises(ConflictError):
        await services.identity.sign_up(email="A@b.co", password="secret2", name="Other")
