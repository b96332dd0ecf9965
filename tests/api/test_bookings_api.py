import pytest

from app.services.pricing import MAX_QUANTITY


@pytest.mark.asyncio
async def test_booking_without_session_redirects_to_login(app_client):
    res = await app_client.post(
        "/bookings", json={"equipment_id": "5", "mode": "rent", "quantity": 2}
    )
    assert res.status_code == 401
    body = res.json()
    assert body["detail"] == "You need to login to rent equipment"
    assert body["redirect"] == {"to": "/login", "from": "/equipment/5"}
    assert res.headers.get("www-authenticate") == "Bearer"


@pytest.mark.asyncio
async def test_booking_after_sign_out_redirects_to_login(app_client, signup):
    headers = await signup()
    await app_client.post("/auth/logout", headers=headers)

    res = await app_client.post(
        "/bookings",
        json={"equipment_id": "1", "mode": "buy", "quantity": 1},
        headers=headers,
    )
    assert res.status_code == 401
    assert res.json()["redirect"] == {"to": "/login", "from": "/equipment/1"}


@pytest.mark.asyncio
async def test_rent_settles_and_shows_on_dashboard(app_client, signup):
    headers = await signup()
    res = await app_client.post(
        "/bookings",
        json={"equipment_id": "1", "mode": "rent", "quantity": 3},
        headers=headers,
    )
    assert res.status_code == 201, res.text
    body = res.json()
    assert body["booking"]["total"] == 3600
    assert body["payment"]["status"] == "completed"
    assert body["payment"]["currency"] == "INR"
    assert body["payment"]["id"].startswith("pmt_")
    assert body["message"] == "John Deere 5050D Tractor rented successfully for 3 day(s)"
    assert body["redirect"] == "/dashboard"

    dash = (await app_client.get("/dashboard", headers=headers)).json()
    assert len(dash["current_rentals"]) == 1
    rental = dash["current_rentals"][0]
    assert rental["id"] == body["payment"]["id"]
    assert rental["status"] == "active"
    assert rental["total_price"] == 3600


@pytest.mark.asyncio
async def test_booking_unknown_equipment_is_404(app_client, signup):
    headers = await signup()
    res = await app_client.post(
        "/bookings", json={"equipment_id": "999", "mode": "buy"}, headers=headers
    )
    assert res.status_code == 404


@pytest.mark.asyncio
async def test_rental_length_is_bounded(app_client, signup):
    headers = await signup()
    res = await app_client.post(
        "/bookings",
        json={"equipment_id": "1", "mode": "rent", "quantity": MAX_QUANTITY},
        headers=headers,
    )
    assert res.status_code == 201, res.text
    assert res.json()["booking"]["total"] == 1200 * MAX_QUANTITY

    for quantity in (MAX_QUANTITY + 1, 4_000_000):
        res = await app_client.post(
            "/bookings",
            json={"equipment_id": "1", "mode": "rent", "quantity": quantity},
            headers=headers,
        )
        assert res.status_code == 422

    dash = (await app_client.get("/dashboard", headers=headers)).json()
    assert len(dash["current_rentals"]) == 1
