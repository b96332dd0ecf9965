from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from app.models.base import Base


class Equipment(Base):
    __tablename__ = "equipment"

    id = Column(String, primary_key=True)  # 例: "1"
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Integer, nullable=False)  # purchase price (INR)
    rental_price = Column(Integer, nullable=False)  # per day (INR)
    # tractors | tillageEquipment | seedingEquipment | landscapeEquipment |
    # cropProtection | harvestEquipment | postHarvest | haulage
    category = Column(String, nullable=False, index=True)
    image = Column(String, nullable=False, default="")
    in_stock = Column(Boolean, nullable=False, default=True)
    featured = Column(Boolean, nullable=False, default=False, index=True)
    # catalog display order
    position = Column(Integer, nullable=False, default=0, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
