"""Repository abstractions for the service layer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

CATEGORY_ALL = "all"

# Display order matches the catalog filter bar.
CATEGORY_LABELS: dict[str, str] = {
    "tractors": "Tractors",
    "tillageEquipment": "Tillage Equipment",
    "seedingEquipment": "Seeding Equipment",
    "landscapeEquipment": "Landscape Equipment",
    "cropProtection": "Crop Protection",
    "harvestEquipment": "Harvest Equipment",
    "postHarvest": "Post Harvest",
    "haulage": "Haulage",
}
CATEGORIES: tuple[str, ...] = tuple(CATEGORY_LABELS)


@dataclass(frozen=True)
class EquipmentRecord:
    id: str
    name: str
    description: str
    price: int
    rental_price: int
    category: str
    image: str
    in_stock: bool
    featured: bool = False


@dataclass(frozen=True)
class AccountRow:
    id: str
    email: str
    name: str | None
    password_hash: str
    created_at: datetime | None = None


class CatalogRepository(Protocol):
    """Read-only repository boundary for the equipment catalog."""

    async def list_all(self) -> list[EquipmentRecord]: ...

    async def get(self, equipment_id: str) -> EquipmentRecord | None: ...

    async def list_by_category(self, category: str) -> list[EquipmentRecord]: ...

    async def list_featured(self) -> list[EquipmentRecord]: ...


class AccountRepository(Protocol):
    """Repository boundary for account lookups used by sign-up/sign-in."""

    async def get_by_email(self, email: str) -> AccountRow | None: ...

    async def add(self, account: AccountRow) -> None: ...


class KeyValueStore(Protocol):
    """String key/value storage (sessions, preferences, order ledger)."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...
