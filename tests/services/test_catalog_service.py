import pytest

from app.core.exceptions import InfrastructureError, NotFoundError, ValidationError
from app.repositories.fallback import FallbackCatalogRepository
from app.repositories.interfaces import EquipmentRecord
from app.repositories.memory import InMemoryCatalogRepository
from app.services.catalog import CatalogService


class _BrokenCatalog:
    """Remote catalog that is always down."""

    async def list_all(self):
        raise InfrastructureError("catalog unavailable")

    async def get(self, equipment_id):
        raise InfrastructureError("catalog unavailable")

    async def list_by_category(self, category):
        raise InfrastructureError("catalog unavailable")

    async def list_featured(self):
        raise InfrastructureError("catalog unavailable")


@pytest.mark.asyncio
async def test_by_id_and_not_found(catalog):
    assert (await catalog.by_id("5")).name == "Kubota Rice Transplanter"
    with pytest.raises(NotFoundError):
        await catalog.by_id("999")


@pytest.mark.asyncio
async def test_by_category_all_returns_unfiltered(catalog):
    assert len(await catalog.by_category("all")) == 12
    haulage = await catalog.by_category("haulage")
    assert [r.id for r in haulage] == ["12"]


@pytest.mark.asyncio
async def test_unknown_category_is_rejected(catalog):
    with pytest.raises(ValidationError):
        await catalog.by_category("boats")
    with pytest.raises(ValidationError):
        await catalog.search("", "boats")


@pytest.mark.asyncio
async def test_featured(catalog):
    assert [r.id for r in await catalog.featured()] == ["1", "3", "5", "8", "11"]


def test_categories_start_with_all():
    cats = CatalogService.categories()
    assert cats[0] == ("all", "All Equipment")
    assert ("haulage", "Haulage") in cats
    assert len(cats) == 9


@pytest.mark.asyncio
async def test_recently_viewed_keeps_last_three_most_recent_first(catalog):
    for equipment_id in ("1", "2", "3", "1", "4"):
        catalog.record_view("user_a", equipment_id)
    assert catalog.recently_viewed_ids("user_a") == ["4", "1", "3"]
    assert [r.id for r in await catalog.recently_viewed("user_a")] == ["4", "1", "3"]
    assert catalog.recently_viewed_ids("user_b") == []


@pytest.mark.asyncio
async def test_fallback_answers_from_builtin_data(store):
    repo = FallbackCatalogRepository(_BrokenCatalog(), InMemoryCatalogRepository())
    svc = CatalogService(repo, store)
    assert len(await svc.list()) == 12
    assert (await svc.by_id("11")).category == "harvestEquipment"
    assert [r.id for r in await svc.by_category("tractors")] == ["1", "2"]


@pytest.mark.asyncio
async def test_fallback_not_used_when_primary_answers(store):
    only = EquipmentRecord(
        id="x1",
        name="Test Baler",
        description="Remote record",
        price=10,
        rental_price=1,
        category="postHarvest",
        image="",
        in_stock=True,
    )
    repo = FallbackCatalogRepository(InMemoryCatalogRepository([only]))
    svc = CatalogService(repo, store)
    assert [r.id for r in await svc.list()] == ["x1"]
