"""Rental and purchase totals."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from app.repositories.interfaces import EquipmentRecord

MIN_QUANTITY = 1
# upper bound for rental days and purchase units
MAX_QUANTITY = 365


class BookingMode(str, Enum):
    RENT = "rent"
    BUY = "buy"


@dataclass(frozen=True)
class BookingRequest:
    """Priced selection; never persisted."""

    equipment_id: str
    mode: BookingMode
    quantity: int  # days when renting, units when buying
    unit_price: int
    total: int


def clamp_quantity(value: int) -> int:
    # Out-of-range input is clamped, not rejected.
    return max(MIN_QUANTITY, min(MAX_QUANTITY, int(value)))


def step_quantity(value: int, delta: int) -> int:
    return clamp_quantity(clamp_quantity(value) + delta)


def rental_total(daily_rate: int, days: int) -> int:
    return daily_rate * clamp_quantity(days)


def purchase_total(unit_price: int, qty: int) -> int:
    return unit_price * clamp_quantity(qty)


def unit_price_for(record: EquipmentRecord, mode: BookingMode) -> int:
    return record.rental_price if mode is BookingMode.RENT else record.price


def quote(record: EquipmentRecord, mode: BookingMode, quantity: int) -> BookingRequest:
    qty = clamp_quantity(quantity)
    unit = unit_price_for(record, mode)
    total = rental_total(unit, qty) if mode is BookingMode.RENT else purchase_total(unit, qty)
    return BookingRequest(
        equipment_id=record.id,
        mode=mode,
        quantity=qty,
        unit_price=unit,
        total=total,
    )
