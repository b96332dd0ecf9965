from __future__ import annotations

from pydantic import BaseModel

from .equipment import EquipmentDTO
from .identity import IdentityDTO


class RentalDTO(BaseModel):
    id: str
    equipment_id: str
    equipment_name: str
    start_date: str
    end_date: str
    total_price: int
    status: str


class PurchaseDTO(BaseModel):
    id: str
    equipment_id: str
    equipment_name: str
    purchase_date: str
    price: int
    quantity: int
    total_price: int
    delivery_status: str


class DashboardDTO(BaseModel):
    identity: IdentityDTO
    current_rentals: list[RentalDTO]
    rental_history: list[RentalDTO]
    purchases: list[PurchaseDTO]
    recently_viewed: list[EquipmentDTO]
