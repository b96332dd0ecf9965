"""Catalog read use cases."""

from __future__ import annotations

import json

from app.core.exceptions import NotFoundError, ValidationError
from app.repositories.interfaces import (
    CATEGORIES,
    CATEGORY_ALL,
    CATEGORY_LABELS,
    CatalogRepository,
    EquipmentRecord,
    KeyValueStore,
)
from app.services.search import filter_equipment

RECENTLY_VIEWED_LIMIT = 3


class CatalogService:
    def __init__(self, repo: CatalogRepository, store: KeyValueStore) -> None:
        self._repo = repo
        self._store = store

    async def list(self) -> list[EquipmentRecord]:
        return await self._repo.list_all()

    async def by_id(self, equipment_id: str) -> EquipmentRecord:
        record = await self._repo.get(equipment_id)
        if record is None:
            raise NotFoundError("Equipment not found")
        return record

    async def by_category(self, category: str) -> list[EquipmentRecord]:
        if category == CATEGORY_ALL:
            return await self._repo.list_all()
        if category not in CATEGORY_LABELS:
            raise ValidationError(f"unknown category: {category}")
        return await self._repo.list_by_category(category)

    async def featured(self) -> list[EquipmentRecord]:
        return await self._repo.list_featured()

    async def search(self, query: str | None, category: str | None) -> list[EquipmentRecord]:
        selected = category or CATEGORY_ALL
        if selected != CATEGORY_ALL and selected not in CATEGORY_LABELS:
            raise ValidationError(f"unknown category: {selected}")
        return filter_equipment(await self._repo.list_all(), query, selected)

    @staticmethod
    def categories() -> list[tuple[str, str]]:
        return [(CATEGORY_ALL, "All Equipment")] + [(c, CATEGORY_LABELS[c]) for c in CATEGORIES]

    # --- recently viewed (per identity) ---

    def _recent_key(self, user_id: str) -> str:
        return f"recently_viewed:{user_id}"

    def record_view(self, user_id: str, equipment_id: str) -> None:
        ids = [i for i in self.recently_viewed_ids(user_id) if i != equipment_id]
        ids.insert(0, equipment_id)
        self._store.set(self._recent_key(user_id), json.dumps(ids[:RECENTLY_VIEWED_LIMIT]))

    def recently_viewed_ids(self, user_id: str) -> list[str]:
        raw = self._store.get(self._recent_key(user_id))
        return list(json.loads(raw)) if raw else []

    async def recently_viewed(self, user_id: str) -> list[EquipmentRecord]:
        out: list[EquipmentRecord] = []
        for equipment_id in self.recently_viewed_ids(user_id):
            record = await self._repo.get(equipment_id)
            if record is not None:
                out.append(record)
        return out
