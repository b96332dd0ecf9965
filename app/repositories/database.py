"""Repository implementations backed by the remote tabular store."""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.exceptions import ConflictError, InfrastructureError
from app.infra.unit_of_work import UnitOfWork
from app.repositories.interfaces import (
    AccountRepository,
    AccountRow,
    CatalogRepository,
    EquipmentRecord,
)

UnitOfWorkFactory = Callable[[], UnitOfWork]


class DatabaseCatalogRepository(CatalogRepository):
    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def list_all(self) -> list[EquipmentRecord]:
        try:
            async with self._uow_factory() as uow:
                return await uow.equipment.select_all()
        except SQLAlchemyError as exc:
            # Unify DB errors as 503
            raise InfrastructureError("catalog unavailable") from exc

    async def get(self, equipment_id: str) -> EquipmentRecord | None:
        try:
            async with self._uow_factory() as uow:
                rows = await uow.equipment.select_by(id=equipment_id)
        except SQLAlchemyError as exc:
            raise InfrastructureError("catalog unavailable") from exc
        return rows[0] if rows else None

    async def list_by_category(self, category: str) -> list[EquipmentRecord]:
        try:
            async with self._uow_factory() as uow:
                return await uow.equipment.select_by(category=category)
        except SQLAlchemyError as exc:
            raise InfrastructureError("catalog unavailable") from exc

    async def list_featured(self) -> list[EquipmentRecord]:
        try:
            async with self._uow_factory() as uow:
                return await uow.equipment.select_by(featured=True)
        except SQLAlchemyError as exc:
            raise InfrastructureError("catalog unavailable") from exc


class DatabaseAccountRepository(AccountRepository):
    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def get_by_email(self, email: str) -> AccountRow | None:
        try:
            async with self._uow_factory() as uow:
                return await uow.accounts.get_by_email(email)
        except SQLAlchemyError as exc:
            raise InfrastructureError("account store unavailable") from exc

    async def add(self, account: AccountRow) -> None:
        try:
            async with self._uow_factory() as uow:
                await uow.accounts.insert(account)
        except IntegrityError as exc:
            raise ConflictError("email already registered") from exc
        except SQLAlchemyError as exc:
            raise InfrastructureError("account store unavailable") from exc
