from __future__ import annotations

from pydantic import BaseModel


class ChatMessageDTO(BaseModel):
    id: str
    text: str
    sender: str
    timestamp: str


class ChatConversationDTO(BaseModel):
    id: str
    state: str
    messages: list[ChatMessageDTO]


class ChatExchangeDTO(BaseModel):
    conversation_id: str
    sent: ChatMessageDTO
    reply: ChatMessageDTO
