from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_chat_registry
from app.dto import ChatConversationDTO, ChatExchangeDTO
from app.dto.mappers import map_chat_message, map_conversation
from app.schemas.chat import ChatMessageCreate
from app.schemas.common import ErrorResponse
from app.services.chat import ChatRegistry

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post(
    "/conversations",
    response_model=ChatConversationDTO,
    status_code=201,
    summary="Start a conversation with the farming assistant",
)
async def start_conversation(registry: ChatRegistry = Depends(get_chat_registry)):
    return map_conversation(registry.start())


@router.get(
    "/conversations/{conversation_id}",
    response_model=ChatConversationDTO,
    responses={404: {"model": ErrorResponse}},
    summary="Conversation transcript",
)
async def get_conversation(
    conversation_id: str, registry: ChatRegistry = Depends(get_chat_registry)
):
    return map_conversation(registry.get(conversation_id))


@router.post(
    "/conversations/{conversation_id}/messages",
    response_model=ChatExchangeDTO,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Send a message and receive the assistant's reply",
)
async def send_message(
    conversation_id: str,
    payload: ChatMessageCreate,
    registry: ChatRegistry = Depends(get_chat_registry),
):
    conversation = registry.get(conversation_id)
    sent, reply = await conversation.send(payload.text)
    return ChatExchangeDTO(
        conversation_id=conversation.id,
        sent=map_chat_message(sent),
        reply=map_chat_message(reply),
    )
