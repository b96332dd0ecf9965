from __future__ import annotations

from pydantic import BaseModel, Field

DEVICE_ID_PATTERN = r"^[A-Za-z0-9_-]+$"


class LanguagePreference(BaseModel):
    language: str = Field(description="english | kannada")
