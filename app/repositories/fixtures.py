"""Built-in catalog dataset.

Served directly by the in-memory catalog and used as the degraded-mode
answer when the remote catalog cannot be reached.
"""

from __future__ import annotations

from app.repositories.interfaces import EquipmentRecord

_TRACTOR_IMAGE = "/lovable-uploads/fb2a6eac-1728-47ad-bbfe-3b0f60627495.png"
_TILLAGE_IMAGE = "/lovable-uploads/79b698fb-fc19-494d-b398-4770d1bd0f11.png"
_SEEDING_IMAGE = "/lovable-uploads/085190d0-91b4-4f9c-8670-0d32aba37dc2.png"
_LANDSCAPE_IMAGE = "/lovable-uploads/5da313d0-221b-4fde-b53b-145691f7b01c.png"

FIXTURE_EQUIPMENT: tuple[EquipmentRecord, ...] = (
    EquipmentRecord(
        id="1",
        name="John Deere 5050D Tractor",
        description=(
            "A powerful 50 HP tractor perfect for medium to large farms. "
            "Features a durable design and excellent fuel efficiency."
        ),
        price=780000,
        rental_price=1200,
        category="tractors",
        image=_TRACTOR_IMAGE,
        in_stock=True,
        featured=True,
    ),
    EquipmentRecord(
        id="2",
        name="Mahindra 475 DI Tractor",
        description=(
            "42 HP tractor with excellent performance for various farming applications. "
            "Comes with power steering and adjustable seat."
        ),
        price=650000,
        rental_price=1000,
        category="tractors",
        image=_TRACTOR_IMAGE,
        in_stock=True,
    ),
    EquipmentRecord(
        id="3",
        name="Sonalika Disc Harrow",
        description=(
            "16-disc heavy-duty harrow for effective soil preparation. "
            "Adjustable angle for different soil conditions."
        ),
        price=85000,
        rental_price=500,
        category="tillageEquipment",
        image=_TILLAGE_IMAGE,
        in_stock=True,
        featured=True,
    ),
    EquipmentRecord(
        id="4",
        name="VST Shakti Power Weeder",
        description=(
            "Efficient power weeder for weed control in row crops. "
            "Reduces labor costs and improves crop yield."
        ),
        price=45000,
        rental_price=300,
        category="tillageEquipment",
        image=_TILLAGE_IMAGE,
        in_stock=True,
    ),
    EquipmentRecord(
        id="5",
        name="Kubota Rice Transplanter",
        description=(
            "4-row rice transplanter with high accuracy and speed. "
            "Perfect for small to medium rice farms."
        ),
        price=250000,
        rental_price=1500,
        category="seedingEquipment",
        image=_SEEDING_IMAGE,
        in_stock=True,
        featured=True,
    ),
    EquipmentRecord(
        id="6",
        name="Kisan Kraft Seed Drill",
        description=(
            "Multi-crop seed drill suitable for various seeds. "
            "Ensures uniform seed placement and optimal germination."
        ),
        price=70000,
        rental_price=600,
        category="seedingEquipment",
        image=_SEEDING_IMAGE,
        in_stock=True,
    ),
    EquipmentRecord(
        id="7",
        name="TAFE Riding Lawn Mower",
        description=(
            "Efficient riding mower for landscape maintenance. "
            "Features adjustable cutting height and comfortable seat."
        ),
        price=120000,
        rental_price=800,
        category="landscapeEquipment",
        image=_LANDSCAPE_IMAGE,
        in_stock=True,
    ),
    EquipmentRecord(
        id="8",
        name="Honda Brush Cutter",
        description=(
            "Powerful brush cutter for clearing tough vegetation. "
            "Comes with multiple attachments for versatile use."
        ),
        price=18000,
        rental_price=200,
        category="landscapeEquipment",
        image=_LANDSCAPE_IMAGE,
        in_stock=True,
        featured=True,
    ),
    EquipmentRecord(
        id="9",
        name="Aspee Tractor Sprayer",
        description=(
            "High-capacity tractor-mounted sprayer for efficient pest control. "
            "Features adjustable nozzles and pressure control."
        ),
        price=45000,
        rental_price=400,
        category="cropProtection",
        image=_SEEDING_IMAGE,
        in_stock=True,
    ),
    EquipmentRecord(
        id="10",
        name="Tirth Agro Rotavator",
        description=(
            "Heavy-duty rotavator for effective soil preparation. "
            "Suitable for various soil types and conditions."
        ),
        price=95000,
        rental_price=700,
        category="tillageEquipment",
        image=_TILLAGE_IMAGE,
        in_stock=True,
    ),
    EquipmentRecord(
        id="11",
        name="Claas Crop Tiger Harvester",
        description=(
            "Compact and efficient combine harvester for wheat, rice, and other crops. "
            "Reduces harvest time significantly."
        ),
        price=1500000,
        rental_price=3000,
        category="harvestEquipment",
        image=_SEEDING_IMAGE,
        in_stock=True,
        featured=True,
    ),
    EquipmentRecord(
        id="12",
        name="Kartar Tractor Trailer",
        description=(
            "Durable hydraulic trailer for efficient transport of farm produce. "
            "Features tipping mechanism for easy unloading."
        ),
        price=120000,
        rental_price=500,
        category="haulage",
        image=_TILLAGE_IMAGE,
        in_stock=True,
    ),
)
