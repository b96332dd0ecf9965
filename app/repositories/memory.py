"""Local (in-process) repository implementations."""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import datetime

from app.repositories.fixtures import FIXTURE_EQUIPMENT
from app.repositories.interfaces import (
    AccountRepository,
    AccountRow,
    CatalogRepository,
    EquipmentRecord,
    KeyValueStore,
)


class InMemoryCatalogRepository(CatalogRepository):
    def __init__(self, records: Iterable[EquipmentRecord] = FIXTURE_EQUIPMENT) -> None:
        self._records: tuple[EquipmentRecord, ...] = tuple(records)

    async def list_all(self) -> list[EquipmentRecord]:
        return list(self._records)

    async def get(self, equipment_id: str) -> EquipmentRecord | None:
        return next((r for r in self._records if r.id == equipment_id), None)

    async def list_by_category(self, category: str) -> list[EquipmentRecord]:
        return [r for r in self._records if r.category == category]

    async def list_featured(self) -> list[EquipmentRecord]:
        return [r for r in self._records if r.featured]


class KeyValueAccountRepository(AccountRepository):
    """Accounts persisted as JSON under ``account:<email>``.

    Registering an email again replaces the stored account.
    """

    prefix = "account:"

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    async def get_by_email(self, email: str) -> AccountRow | None:
        raw = self._store.get(self.prefix + email)
        if raw is None:
            return None
        data = json.loads(raw)
        created_at = data.get("created_at")
        return AccountRow(
            id=data["id"],
            email=data["email"],
            name=data.get("name"),
            password_hash=data["password_hash"],
            created_at=datetime.fromisoformat(created_at) if created_at else None,
        )

    async def add(self, account: AccountRow) -> None:
        payload = {
            "id": account.id,
            "email": account.email,
            "name": account.name,
            "password_hash": account.password_hash,
            "created_at": account.created_at.isoformat() if account.created_at else None,
        }
        self._store.set(self.prefix + account.email, json.dumps(payload))
