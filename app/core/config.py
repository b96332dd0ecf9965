# app/core/config.py
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_env: str = "dev"
    database_url: str | None = None  # = DATABASE_URL

    # memory: built-in fixture catalog / database: remote tabular store
    catalog_backend: Literal["memory", "database"] = "memory"
    catalog_fallback_enabled: bool = True
    # local: key-value storage / database: remote accounts table
    account_backend: Literal["local", "database"] = "local"
    # JSON file used as durable local storage; in-memory when unset
    kv_store_path: str | None = None

    payment_latency_seconds: float = 2.0
    chat_reply_delay_seconds: float = 1.5
    chat_max_conversations: int = 1000
    currency: str = "INR"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",  # そのまま DATABASE_URL を読む
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
