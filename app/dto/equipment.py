"""DTOs for equipment resources exposed via the public API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EquipmentDTO(BaseModel):
    id: str = Field(description="Equipment ID")
    name: str = Field(description="Display name")
    description: str = Field(description="Description")
    price: int = Field(description="Purchase price (INR)")
    rental_price: int = Field(description="Rental price per day (INR)")
    category: str = Field(description="Category id")
    image: str = Field(description="Image path or URL")
    in_stock: bool = Field(description="Availability flag")
    featured: bool = Field(default=False, description="Promotional placement flag")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "1",
                "name": "John Deere 5050D Tractor",
                "description": "A powerful 50 HP tractor perfect for medium to large farms.",
                "price": 780000,
                "rental_price": 1200,
                "category": "tractors",
                "image": "/lovable-uploads/fb2a6eac-1728-47ad-bbfe-3b0f60627495.png",
                "in_stock": True,
                "featured": True,
            }
        },
    )


class CategoryDTO(BaseModel):
    id: str
    name: str
