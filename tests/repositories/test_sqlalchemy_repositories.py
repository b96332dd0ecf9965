from datetime import UTC, datetime

import pytest
from sqlalchemy.exc import OperationalError

from app.core.exceptions import ConflictError, InfrastructureError
from app.infra.unit_of_work import SqlAlchemyUnitOfWork
from app.repositories.database import DatabaseAccountRepository, DatabaseCatalogRepository
from app.repositories.fallback import FallbackCatalogRepository
from app.repositories.fixtures import FIXTURE_EQUIPMENT
from app.repositories.interfaces import AccountRow


@pytest.fixture
def uow_factory(session_factory):
    return lambda: SqlAlchemyUnitOfWork(session_factory)


async def _seed(uow_factory, records=FIXTURE_EQUIPMENT):
    async with uow_factory() as uow:
        return await uow.equipment.insert(records)


@pytest.mark.asyncio
async def test_insert_keeps_catalog_order(uow_factory):
    assert await _seed(uow_factory) == 12
    repo = DatabaseCatalogRepository(uow_factory)
    rows = await repo.list_all()
    # "10" must not sort before "2"
    assert [r.id for r in rows] == [r.id for r in FIXTURE_EQUIPMENT]
    assert rows[0] == FIXTURE_EQUIPMENT[0]


@pytest.mark.asyncio
async def test_select_by_equality(uow_factory):
    await _seed(uow_factory)
    repo = DatabaseCatalogRepository(uow_factory)
    assert [r.id for r in await repo.list_by_category("seedingEquipment")] == ["5", "6"]
    assert [r.id for r in await repo.list_featured()] == ["1", "3", "5", "8", "11"]
    assert (await repo.get("11")).name == "Claas Crop Tiger Harvester"
    assert await repo.get("nope") is None


@pytest.mark.asyncio
async def test_seed_is_get_or_create(uow_factory):
    await _seed(uow_factory, FIXTURE_EQUIPMENT[:4])
    async with uow_factory() as uow:
        existing = await uow.equipment.existing_ids()
        inserted = await uow.equipment.insert(r for r in FIXTURE_EQUIPMENT if r.id not in existing)
    assert inserted == 8
    rows = await DatabaseCatalogRepository(uow_factory).list_all()
    assert [r.id for r in rows] == [r.id for r in FIXTURE_EQUIPMENT]


@pytest.mark.asyncio
async def test_account_insert_and_duplicate(uow_factory):
    repo = DatabaseAccountRepository(uow_factory)
    row = AccountRow(
        id="user_1",
        email="a@b.co",
        name="Ravi",
        password_hash="hash",
        created_at=datetime.now(UTC),
    )
    await repo.add(row)
    loaded = await repo.get_by_email("a@b.co")
    assert loaded is not None
    assert loaded.id == "user_1"
    assert await repo.get_by_email("x@b.co") is None

    with pytest.raises(ConflictError):
        await repo.add(AccountRow(id="user_2", email="a@b.co", name=None, password_hash="h"))


class _FailingUnitOfWork:
    async def __aenter__(self):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    async def __aexit__(self, *exc):
        return None


@pytest.mark.asyncio
async def test_database_errors_become_infrastructure_errors():
    repo = DatabaseCatalogRepository(lambda: _FailingUnitOfWork())
    with pytest.raises(InfrastructureError):
        await repo.list_all()
    accounts = DatabaseAccountRepository(lambda: _FailingUnitOfWork())
    with pytest.raises(InfrastructureError):
        await accounts.get_by_email("a@b.co")


@pytest.mark.asyncio
async def test_fallback_over_unreachable_database():
    repo = FallbackCatalogRepository(DatabaseCatalogRepository(lambda: _FailingUnitOfWork()))
    assert len(await repo.list_all()) == 12
    assert (await repo.get("1")).name == "John Deere 5050D Tractor"
