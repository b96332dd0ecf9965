"""Catalog filtering: free-text match intersected with category equality."""

from __future__ import annotations

from collections.abc import Iterable

from app.repositories.interfaces import CATEGORY_ALL, EquipmentRecord


def matches_query(record: EquipmentRecord, query: str) -> bool:
    needle = query.strip().lower()
    if not needle:
        return True
    return needle in record.name.lower() or needle in record.description.lower()


def filter_equipment(
    records: Iterable[EquipmentRecord],
    query: str | None = "",
    category: str | None = CATEGORY_ALL,
) -> list[EquipmentRecord]:
    """Return the records matching ``query`` and ``category`` in catalog order.

    ``query`` is matched case-insensitively as a substring of the name or the
    description. ``category`` "all" (or empty) disables the category filter.
    """
    text = query or ""
    selected = category or CATEGORY_ALL
    return [
        r
        for r in records
        if matches_query(r, text) and (selected == CATEGORY_ALL or r.category == selected)
    ]
