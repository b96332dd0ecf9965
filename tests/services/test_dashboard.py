from datetime import date

import pytest

from app.core.exceptions import LoginRequiredError
from app.repositories.fixtures import FIXTURE_EQUIPMENT
from app.services.dashboard import DashboardService, OrderLedger, Rental
from app.services.identity import Identity

USER = Identity(id="user_1", email="a@b.co", name="Ravi")


def _rental(start, end):
    return Rental(
        id="r1",
        equipment_id="1",
        equipment_name="John Deere 5050D Tractor",
        start_date=start,
        end_date=end,
        total_price=1200,
    )


@pytest.mark.parametrize(
    "today, expected",
    [
        (date(2024, 5, 31), "upcoming"),
        (date(2024, 6, 1), "active"),
        (date(2024, 6, 3), "active"),
        (date(2024, 6, 4), "completed"),
        (date(2024, 7, 1), "completed"),
    ],
)
def test_rental_status(today, expected):
    assert _rental(date(2024, 6, 1), date(2024, 6, 4)).status_on(today) == expected


def test_ledger_round_trips_through_store(store):
    ledger = OrderLedger(store, today=lambda: date(2024, 6, 1))
    rental = ledger.record_rental(
        USER.id, record=FIXTURE_EQUIPMENT[0], days=3, total=3600, order_id="pmt_1"
    )
    assert rental.end_date == date(2024, 6, 4)
    assert ledger.rentals(USER.id) == [rental]
    assert ledger.rentals("someone_else") == []


@pytest.mark.asyncio
async def test_overview_requires_identity(store, catalog):
    svc = DashboardService(OrderLedger(store), catalog)
    with pytest.raises(LoginRequiredError) as ei:
        await svc.overview(None)
    assert ei.value.return_to == "/dashboard"


@pytest.mark.asyncio
async def test_overview_splits_current_and_history(store, catalog):
    days = iter([date(2024, 5, 1), date(2024, 6, 1)])
    ledger = OrderLedger(store, today=lambda: next(days))
    ledger.record_rental(USER.id, record=FIXTURE_EQUIPMENT[0], days=2, total=2400, order_id="old")
    ledger.record_rental(USER.id, record=FIXTURE_EQUIPMENT[1], days=5, total=5000, order_id="new")
    catalog.record_view(USER.id, "7")

    svc = DashboardService(ledger, catalog, today=lambda: date(2024, 6, 2))
    dash = await svc.overview(USER)
    assert [r.id for r in dash.current_rentals] == ["new"]
    assert [r.id for r in dash.rental_history] == ["old"]
    assert dash.purchases == []
    assert [r.id for r in dash.recently_viewed] == ["7"]
