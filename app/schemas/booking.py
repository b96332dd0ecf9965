from __future__ import annotations

from pydantic import BaseModel, Field

from app.services.pricing import MAX_QUANTITY, BookingMode


class QuoteRequest(BaseModel):
    mode: BookingMode = Field(description="rent | buy")
    # Values below 1 are accepted here and clamped to 1 by the pricing layer.
    quantity: int = Field(
        default=1,
        le=MAX_QUANTITY,
        description="Days when renting, units when buying",
    )


class BookingCreateRequest(QuoteRequest):
    equipment_id: str = Field(min_length=1, max_length=64)
