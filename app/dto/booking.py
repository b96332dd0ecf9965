"""DTOs for quotes and settled bookings."""

from __future__ import annotations

from pydantic import BaseModel, Field


class QuoteDTO(BaseModel):
    equipment_id: str
    mode: str = Field(description="rent | buy")
    quantity: int = Field(description="Days when renting, units when buying (>= 1)")
    unit_price: int
    total: int


class PaymentDTO(BaseModel):
    id: str
    amount: int
    currency: str
    description: str
    payment_method: str
    status: str
    timestamp: str


class BookingReceiptDTO(BaseModel):
    booking: QuoteDTO
    payment: PaymentDTO
    message: str
    redirect: str = Field(description="Where the client should navigate next")
