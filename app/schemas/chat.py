from __future__ import annotations

from pydantic import BaseModel, Field


class ChatMessageCreate(BaseModel):
    text: str = Field(default="", max_length=2000)
