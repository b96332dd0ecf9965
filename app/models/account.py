from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func

from app.models.base import Base


class Account(Base):
    __tablename__ = "accounts"

    id = Column(String, primary_key=True)  # user_<epoch ms>
    email = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=True)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
