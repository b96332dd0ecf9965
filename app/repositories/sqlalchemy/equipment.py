"""SQLAlchemy implementation of equipment queries."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Equipment
from app.repositories.interfaces import EquipmentRecord


def _to_record(row: Equipment) -> EquipmentRecord:
    return EquipmentRecord(
        id=str(row.id),
        name=row.name,
        description=row.description or "",
        price=int(row.price),
        rental_price=int(row.rental_price),
        category=row.category,
        image=row.image or "",
        in_stock=bool(row.in_stock),
        featured=bool(row.featured),
    )


class SqlAlchemyEquipmentRepository:
    """Generic table access: select-all, select-by-equality, insert."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _fetch(self, stmt: Select) -> list[EquipmentRecord]:
        stmt = stmt.order_by(Equipment.position.asc(), Equipment.id.asc())
        rows = await self._session.scalars(stmt)
        return [_to_record(row) for row in rows.all()]

    async def select_all(self) -> list[EquipmentRecord]:
        return await self._fetch(select(Equipment))

    async def select_by(self, **criteria: object) -> list[EquipmentRecord]:
        stmt = select(Equipment)
        for column, value in criteria.items():
            stmt = stmt.where(getattr(Equipment, column) == value)
        return await self._fetch(stmt)

    async def existing_ids(self) -> set[str]:
        return set((await self._session.scalars(select(Equipment.id))).all())

    async def insert(self, records: Iterable[EquipmentRecord]) -> int:
        """Append records after the current last position; returns the count."""
        last = await self._session.scalar(select(func.max(Equipment.position)))
        position = (last or 0) + 1
        count = 0
        for record in records:
            self._session.add(
                Equipment(
                    id=record.id,
                    name=record.name,
                    description=record.description,
                    price=record.price,
                    rental_price=record.rental_price,
                    category=record.category,
                    image=record.image,
                    in_stock=record.in_stock,
                    featured=record.featured,
                    position=position + count,
                )
            )
            count += 1
        await self._session.flush()
        return count
