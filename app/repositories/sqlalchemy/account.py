"""SQLAlchemy implementation of account lookups."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Account
from app.repositories.interfaces import AccountRow


class SqlAlchemyAccountRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_email(self, email: str) -> AccountRow | None:
        row = await self._session.scalar(select(Account).where(Account.email == email))
        if row is None:
            return None
        return AccountRow(
            id=row.id,
            email=row.email,
            name=row.name,
            password_hash=row.password_hash,
            created_at=row.created_at,
        )

    async def insert(self, account: AccountRow) -> None:
        self._session.add(
            Account(
                id=account.id,
                email=account.email,
                name=account.name,
                password_hash=account.password_hash,
            )
        )
        await self._session.flush()
