"""Farming assistant chat: canned replies picked by keyword rules."""

from __future__ import annotations

import asyncio
import uuid
from collections import OrderedDict
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Literal

import structlog

from app.core.exceptions import ConflictError, NotFoundError, ValidationError

GREETING = "Ask me anything about farming!"

FALLBACK_REPLY = (
    "I'm not sure about that. Can you please ask something related to farming "
    "equipment or crops?"
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ChatRule:
    keywords: tuple[str, ...]
    reply: str

    def matches(self, lowered: str) -> bool:
        return any(k in lowered for k in self.keywords)


# Evaluated top to bottom; the first matching rule wins.
CHAT_RULES: tuple[ChatRule, ...] = (
    ChatRule(
        ("tractor",),
        "Tractors are essential farming equipment. We offer various tractor models for rent "
        "and purchase, ranging from 20 HP to 75 HP. For small farms, 20-35 HP tractors are "
        "ideal, while larger operations benefit from 45-75 HP models.",
    ),
    ChatRule(
        ("seed", "planting"),
        "For seeding equipment, we have seed drills, planters, and broadcasters available. "
        "Modern seed drills can help you achieve uniform seed placement and better "
        "germination rates.",
    ),
    ChatRule(
        ("harvest",),
        "Our harvest equipment includes combine harvesters, threshers, and reapers. Combine "
        "harvesters are excellent for wheat, rice, and other grain crops, significantly "
        "reducing harvest time.",
    ),
    ChatRule(
        ("rice", "paddy"),
        "For rice cultivation, we recommend our specialized rice transplanters, paddy "
        "weeders, and rice combine harvesters. The ideal time for planting rice depends on "
        "your region, but it generally requires consistent water supply.",
    ),
    ChatRule(
        ("wheat",),
        "Wheat farming requires proper seed drills, fertilizer applicators, and harvest "
        "equipment. Our wheat combine harvesters can handle 1-2 acres per hour, making "
        "harvesting efficient.",
    ),
    ChatRule(
        ("rent", "price"),
        "Our rental prices vary based on equipment type and duration. Tractors start at "
        "₹800/day, while specialized equipment like combine harvesters range from "
        "₹1500-3000/day. For exact pricing, please check the equipment details page.",
    ),
    ChatRule(
        ("soil", "fertilizer"),
        "For soil preparation, we offer tillers, cultivators, and disc harrows. When applying "
        "fertilizers, our precision applicators can help optimize your input costs while "
        "maximizing yield.",
    ),
)


def reply_for(text: str, rules: Sequence[ChatRule] = CHAT_RULES) -> str:
    lowered = text.lower()
    for rule in rules:
        if rule.matches(lowered):
            return rule.reply
    return FALLBACK_REPLY


class ConversationState(str, Enum):
    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"


@dataclass(frozen=True)
class ChatMessage:
    text: str
    sender: Literal["user", "bot"]
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


class ChatConversation:
    """Append-only transcript with a single pending reply at a time."""

    def __init__(self, *, reply_delay_seconds: float = 1.5, greeting: str = GREETING) -> None:
        self.id = uuid.uuid4().hex
        self.state = ConversationState.IDLE
        self._delay = max(0.0, reply_delay_seconds)
        self._messages: list[ChatMessage] = [ChatMessage(text=greeting, sender="bot")]

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    async def send(self, text: str) -> tuple[ChatMessage, ChatMessage]:
        if not text or not text.strip():
            raise ValidationError("message must not be empty")
        if self.state is ConversationState.AWAITING_REPLY:
            raise ConflictError("a reply is already pending")

        user_message = ChatMessage(text=text, sender="user")
        self._messages.append(user_message)
        self.state = ConversationState.AWAITING_REPLY
        try:
            await asyncio.sleep(self._delay)
            bot_message = ChatMessage(text=reply_for(text), sender="bot")
            self._messages.append(bot_message)
        finally:
            self.state = ConversationState.IDLE
        return user_message, bot_message


class ChatRegistry:
    """In-memory conversations; the oldest are evicted past ``max_conversations``."""

    def __init__(self, *, reply_delay_seconds: float = 1.5, max_conversations: int = 1000) -> None:
        self._delay = reply_delay_seconds
        self._max = max(1, max_conversations)
        self._conversations: OrderedDict[str, ChatConversation] = OrderedDict()

    def __len__(self) -> int:
        return len(self._conversations)

    def start(self) -> ChatConversation:
        conversation = ChatConversation(reply_delay_seconds=self._delay)
        self._conversations[conversation.id] = conversation
        while len(self._conversations) > self._max:
            evicted, _ = self._conversations.popitem(last=False)
            logger.info("chat_conversation_evicted", conversation_id=evicted)
        return conversation

    def get(self, conversation_id: str) -> ChatConversation:
        conversation = self._conversations.get(conversation_id)
        if conversation is None:
            raise NotFoundError("conversation not found")
        self._conversations.move_to_end(conversation_id)
        return conversation
