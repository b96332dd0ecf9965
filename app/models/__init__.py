# モジュール読み込み用（Alembicがモデルを見つけるために必要）
# app/models/__init__.py
from .account import Account
from .base import Base
from .equipment import Equipment

__all__ = [
    "Base",
    "Account",
    "Equipment",
]
