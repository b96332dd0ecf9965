"""Order ledger and the signed-in user's dashboard."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from datetime import date, timedelta
from typing import Literal

from app.core.exceptions import LoginRequiredError
from app.repositories.interfaces import EquipmentRecord, KeyValueStore
from app.services.catalog import CatalogService
from app.services.identity import Identity

RentalStatus = Literal["active", "upcoming", "completed"]
DeliveryStatus = Literal["processing", "shipped", "delivered"]

DASHBOARD_PATH = "/dashboard"


@dataclass(frozen=True)
class Rental:
    id: str
    equipment_id: str
    equipment_name: str
    start_date: date
    end_date: date
    total_price: int

    def status_on(self, today: date) -> RentalStatus:
        if today < self.start_date:
            return "upcoming"
        if today < self.end_date:
            return "active"
        return "completed"


@dataclass(frozen=True)
class Purchase:
    id: str
    equipment_id: str
    equipment_name: str
    purchase_date: date
    price: int
    quantity: int
    total_price: int
    delivery_status: DeliveryStatus = "processing"


def _dump(obj) -> dict:
    out = asdict(obj)
    for key, value in out.items():
        if isinstance(value, date):
            out[key] = value.isoformat()
    return out


class OrderLedger:
    """Settled rentals and purchases per identity, kept in the key-value store."""

    def __init__(self, store: KeyValueStore, today: Callable[[], date] = date.today) -> None:
        self._store = store
        self._today = today

    def _key(self, user_id: str) -> str:
        return f"orders:{user_id}"

    def _read(self, user_id: str) -> dict[str, list[dict]]:
        raw = self._store.get(self._key(user_id))
        data = json.loads(raw) if raw else {}
        return {"rentals": data.get("rentals", []), "purchases": data.get("purchases", [])}

    def _write(self, user_id: str, data: dict[str, list[dict]]) -> None:
        self._store.set(self._key(user_id), json.dumps(data))

    def record_rental(
        self, user_id: str, *, record: EquipmentRecord, days: int, total: int, order_id: str
    ) -> Rental:
        start = self._today()
        rental = Rental(
            id=order_id,
            equipment_id=record.id,
            equipment_name=record.name,
            start_date=start,
            end_date=start + timedelta(days=days),
            total_price=total,
        )
        data = self._read(user_id)
        data["rentals"].append(_dump(rental))
        self._write(user_id, data)
        return rental

    def record_purchase(
        self, user_id: str, *, record: EquipmentRecord, quantity: int, total: int, order_id: str
    ) -> Purchase:
        purchase = Purchase(
            id=order_id,
            equipment_id=record.id,
            equipment_name=record.name,
            purchase_date=self._today(),
            price=record.price,
            quantity=quantity,
            total_price=total,
        )
        data = self._read(user_id)
        data["purchases"].append(_dump(purchase))
        self._write(user_id, data)
        return purchase

    def rentals(self, user_id: str) -> list[Rental]:
        return [
            Rental(
                id=r["id"],
                equipment_id=r["equipment_id"],
                equipment_name=r["equipment_name"],
                start_date=date.fromisoformat(r["start_date"]),
                end_date=date.fromisoformat(r["end_date"]),
                total_price=int(r["total_price"]),
            )
            for r in self._read(user_id)["rentals"]
        ]

    def purchases(self, user_id: str) -> list[Purchase]:
        return [
            Purchase(
                id=p["id"],
                equipment_id=p["equipment_id"],
                equipment_name=p["equipment_name"],
                purchase_date=date.fromisoformat(p["purchase_date"]),
                price=int(p["price"]),
                quantity=int(p["quantity"]),
                total_price=int(p["total_price"]),
                delivery_status=p.get("delivery_status", "processing"),
            )
            for p in self._read(user_id)["purchases"]
        ]


@dataclass
class Dashboard:
    identity: Identity
    today: date
    current_rentals: list[Rental] = field(default_factory=list)
    rental_history: list[Rental] = field(default_factory=list)
    purchases: list[Purchase] = field(default_factory=list)
    recently_viewed: list[EquipmentRecord] = field(default_factory=list)


class DashboardService:
    def __init__(
        self,
        ledger: OrderLedger,
        catalog: CatalogService,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._ledger = ledger
        self._catalog = catalog
        self._today = today

    async def overview(self, identity: Identity | None) -> Dashboard:
        if identity is None:
            raise LoginRequiredError(
                "Please login to access the dashboard", return_to=DASHBOARD_PATH
            )
        today = self._today()
        rentals = self._ledger.rentals(identity.id)
        return Dashboard(
            identity=identity,
            today=today,
            current_rentals=[r for r in rentals if r.status_on(today) != "completed"],
            rental_history=[r for r in rentals if r.status_on(today) == "completed"],
            purchases=self._ledger.purchases(identity.id),
            recently_viewed=await self._catalog.recently_viewed(identity.id),
        )
