"""Utilities to map domain objects into DTOs."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date, datetime

from app.dto import (
    BookingReceiptDTO,
    ChatConversationDTO,
    ChatMessageDTO,
    DashboardDTO,
    EquipmentDTO,
    IdentityDTO,
    PaymentDTO,
    PurchaseDTO,
    QuoteDTO,
    RentalDTO,
    SessionDTO,
)
from app.repositories.interfaces import EquipmentRecord
from app.services.booking import BookingReceipt
from app.services.chat import ChatConversation, ChatMessage
from app.services.dashboard import Dashboard, Purchase, Rental
from app.services.identity import Identity, Session
from app.services.payment import PaymentDetails
from app.services.pricing import BookingRequest


def _iso(value: date | datetime) -> str:
    return value.isoformat()


def map_equipment(record: EquipmentRecord) -> EquipmentDTO:
    return EquipmentDTO(**asdict(record))


def map_quote(request: BookingRequest) -> QuoteDTO:
    return QuoteDTO(
        equipment_id=request.equipment_id,
        mode=request.mode.value,
        quantity=request.quantity,
        unit_price=request.unit_price,
        total=request.total,
    )


def map_payment(payment: PaymentDetails) -> PaymentDTO:
    return PaymentDTO(
        id=payment.id,
        amount=payment.amount,
        currency=payment.currency,
        description=payment.description,
        payment_method=payment.payment_method,
        status=payment.status,
        timestamp=_iso(payment.timestamp),
    )


def map_receipt(receipt: BookingReceipt) -> BookingReceiptDTO:
    return BookingReceiptDTO(
        booking=map_quote(receipt.request),
        payment=map_payment(receipt.payment),
        message=receipt.message,
        redirect=receipt.redirect,
    )


def map_identity(identity: Identity) -> IdentityDTO:
    return IdentityDTO(id=identity.id, email=identity.email, name=identity.name)


def map_session(session: Session, *, redirect: str) -> SessionDTO:
    return SessionDTO(
        token=session.token,
        identity=map_identity(session.identity),
        redirect=redirect,
    )


def map_chat_message(message: ChatMessage) -> ChatMessageDTO:
    return ChatMessageDTO(
        id=message.id,
        text=message.text,
        sender=message.sender,
        timestamp=_iso(message.timestamp),
    )


def map_conversation(conversation: ChatConversation) -> ChatConversationDTO:
    return ChatConversationDTO(
        id=conversation.id,
        state=conversation.state.value,
        messages=[map_chat_message(m) for m in conversation.messages],
    )


def map_rental(rental: Rental, *, today: date) -> RentalDTO:
    return RentalDTO(
        id=rental.id,
        equipment_id=rental.equipment_id,
        equipment_name=rental.equipment_name,
        start_date=_iso(rental.start_date),
        end_date=_iso(rental.end_date),
        total_price=rental.total_price,
        status=rental.status_on(today),
    )


def map_purchase(purchase: Purchase) -> PurchaseDTO:
    return PurchaseDTO(
        id=purchase.id,
        equipment_id=purchase.equipment_id,
        equipment_name=purchase.equipment_name,
        purchase_date=_iso(purchase.purchase_date),
        price=purchase.price,
        quantity=purchase.quantity,
        total_price=purchase.total_price,
        delivery_status=purchase.delivery_status,
    )


def map_dashboard(dashboard: Dashboard) -> DashboardDTO:
    return DashboardDTO(
        identity=map_identity(dashboard.identity),
        current_rentals=[map_rental(r, today=dashboard.today) for r in dashboard.current_rentals],
        rental_history=[map_rental(r, today=dashboard.today) for r in dashboard.rental_history],
        purchases=[map_purchase(p) for p in dashboard.purchases],
        recently_viewed=[map_equipment(r) for r in dashboard.recently_viewed],
    )
