"""SQLAlchemy implementations of repository interfaces."""

from .account import SqlAlchemyAccountRepository
from .equipment import SqlAlchemyEquipmentRepository

__all__ = [
    "SqlAlchemyAccountRepository",
    "SqlAlchemyEquipmentRepository",
]
