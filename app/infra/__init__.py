"""Infrastructure helpers: Unit of Work and service wiring."""

from .unit_of_work import SqlAlchemyUnitOfWork, UnitOfWork

__all__ = ["UnitOfWork", "SqlAlchemyUnitOfWork"]
