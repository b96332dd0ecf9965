"""Public DTO exports for FastAPI response models."""

from .booking import BookingReceiptDTO, PaymentDTO, QuoteDTO
from .chat import ChatConversationDTO, ChatExchangeDTO, ChatMessageDTO
from .dashboard import DashboardDTO, PurchaseDTO, RentalDTO
from .equipment import CategoryDTO, EquipmentDTO
from .identity import IdentityDTO, SessionDTO

__all__ = [
    "BookingReceiptDTO",
    "CategoryDTO",
    "ChatConversationDTO",
    "ChatExchangeDTO",
    "ChatMessageDTO",
    "DashboardDTO",
    "EquipmentDTO",
    "IdentityDTO",
    "PaymentDTO",
    "PurchaseDTO",
    "QuoteDTO",
    "RentalDTO",
    "SessionDTO",
]
