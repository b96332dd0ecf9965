import pytest


@pytest.mark.asyncio
async def test_list_all_in_catalog_order(app_client):
    res = await app_client.get("/equipment")
    assert res.status_code == 200
    body = res.json()
    assert [e["id"] for e in body] == [str(i) for i in range(1, 13)]
    assert {"id", "name", "price", "rental_price", "category", "in_stock"} <= set(body[0])


@pytest.mark.asyncio
async def test_search_and_category_filter(app_client):
    res = await app_client.get("/equipment", params={"q": "TRACTOR", "category": "tractors"})
    assert res.status_code == 200
    assert [e["id"] for e in res.json()] == ["1", "2"]

    res = await app_client.get("/equipment", params={"q": "submarine"})
    assert res.status_code == 200
    assert res.json() == []


@pytest.mark.asyncio
async def test_unknown_category_is_400(app_client):
    res = await app_client.get("/equipment", params={"category": "boats"})
    assert res.status_code == 400
    assert "boats" in res.json()["detail"]


@pytest.mark.asyncio
async def test_categories_featured_and_by_category(app_client):
    cats = (await app_client.get("/equipment/categories")).json()
    assert cats[0] == {"id": "all", "name": "All Equipment"}

    featured = (await app_client.get("/equipment/featured")).json()
    assert [e["id"] for e in featured] == ["1", "3", "5", "8", "11"]

    res = await app_client.get("/equipment/category/landscapeEquipment")
    assert [e["id"] for e in res.json()] == ["7", "8"]

    res = await app_client.get("/equipment/category/all")
    assert len(res.json()) == 12


@pytest.mark.asyncio
async def test_detail_and_not_found(app_client):
    res = await app_client.get("/equipment/11")
    assert res.status_code == 200
    assert res.json()["name"] == "Claas Crop Tiger Harvester"

    res = await app_client.get("/equipment/999")
    assert res.status_code == 404
    assert res.json() == {"detail": "Equipment not found"}


@pytest.mark.asyncio
async def test_quote_clamps_quantity(app_client):
    res = await app_client.post("/equipment/1/quote", json={"mode": "rent", "quantity": 0})
    assert res.status_code == 200
    assert res.json() == {
        "equipment_id": "1",
        "mode": "rent",
        "quantity": 1,
        "unit_price": 1200,
        "total": 1200,
    }

    res = await app_client.post("/equipment/1/quote", json={"mode": "buy", "quantity": 2})
    assert res.json()["total"] == 1560000


@pytest.mark.asyncio
async def test_quote_rejects_unknown_mode(app_client):
    res = await app_client.post("/equipment/1/quote", json={"mode": "lease"})
    assert res.status_code == 422
