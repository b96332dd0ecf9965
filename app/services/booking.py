"""Booking flow: selection, identity check, simulated payment, settlement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import structlog

from app.core.exceptions import (
    BookingStateError,
    ConflictError,
    LoginRequiredError,
    PaymentError,
)
from app.repositories.interfaces import EquipmentRecord
from app.services.catalog import CatalogService
from app.services.dashboard import DASHBOARD_PATH, OrderLedger
from app.services.identity import Identity
from app.services.payment import PaymentDetails, SimulatedPaymentGateway
from app.services.pricing import BookingMode, BookingRequest, quote, step_quantity

logger = structlog.get_logger(__name__)


class BookingState(str, Enum):
    BROWSING = "browsing"
    SELECTING = "selecting"
    CONFIRMING = "confirming"
    PROCESSING = "processing"
    SETTLED = "settled"


def equipment_path(equipment_id: str) -> str:
    return f"/equipment/{equipment_id}"


class BookingFlow:
    """State machine for one rent/buy attempt on one equipment record."""

    def __init__(self, equipment: EquipmentRecord, gateway: SimulatedPaymentGateway) -> None:
        self.equipment = equipment
        self.state = BookingState.BROWSING
        self.identity: Identity | None = None
        self.request: BookingRequest | None = None
        self.payment: PaymentDetails | None = None
        self._gateway = gateway

    def _expect(self, *allowed: BookingState) -> None:
        if self.state not in allowed:
            raise BookingStateError(f"cannot move from {self.state.value}")

    def _selected(self) -> BookingRequest:
        if self.request is None:
            raise BookingStateError("no selection made")
        return self.request

    @property
    def redirect_to(self) -> str | None:
        return DASHBOARD_PATH if self.state is BookingState.SETTLED else None

    def select(self, mode: BookingMode, quantity: int = 1) -> BookingRequest:
        self._expect(BookingState.BROWSING, BookingState.SELECTING)
        self.request = quote(self.equipment, mode, quantity)
        self.state = BookingState.SELECTING
        return self.request

    def increment(self) -> BookingRequest:
        return self._step(+1)

    def decrement(self) -> BookingRequest:
        return self._step(-1)

    def _step(self, delta: int) -> BookingRequest:
        self._expect(BookingState.SELECTING)
        current = self._selected()
        self.request = quote(self.equipment, current.mode, step_quantity(current.quantity, delta))
        return self.request

    def confirm(self, identity: Identity | None) -> Identity:
        self._expect(BookingState.SELECTING)
        if identity is None:
            action = "rent" if self.request and self.request.mode is BookingMode.RENT else "buy"
            raise LoginRequiredError(
                f"You need to login to {action} equipment",
                return_to=equipment_path(self.equipment.id),
            )
        if not self.equipment.in_stock:
            raise ConflictError("equipment is out of stock")
        self.identity = identity
        self.state = BookingState.CONFIRMING
        return identity

    async def process(self) -> PaymentDetails:
        self._expect(BookingState.CONFIRMING)
        request = self._selected()
        self.state = BookingState.PROCESSING
        payment = await self._gateway.process_payment(
            amount=request.total,
            description=self.description(),
        )
        if not await self._gateway.verify_payment(payment.id):
            # 決済未確認のままでは settle しない
            self.state = BookingState.CONFIRMING
            logger.warning(
                "payment_verification_failed",
                equipment_id=self.equipment.id,
                payment_id=payment.id,
            )
            raise PaymentError("payment could not be verified")
        self.payment = payment
        self.state = BookingState.SETTLED
        return payment

    def description(self) -> str:
        request = self._selected()
        if request.mode is BookingMode.RENT:
            return f"Rental of {self.equipment.name} for {request.quantity} day(s)"
        return f"Purchase of {request.quantity} x {self.equipment.name}"

    def success_message(self) -> str:
        request = self._selected()
        if request.mode is BookingMode.RENT:
            return f"{self.equipment.name} rented successfully for {request.quantity} day(s)"
        return f"{self.equipment.name} purchased successfully!"


@dataclass(frozen=True)
class BookingReceipt:
    request: BookingRequest
    payment: PaymentDetails
    message: str
    redirect: str


class BookingService:
    def __init__(
        self,
        catalog: CatalogService,
        gateway: SimulatedPaymentGateway,
        ledger: OrderLedger,
    ) -> None:
        self._catalog = catalog
        self._gateway = gateway
        self._ledger = ledger

    async def quote(self, equipment_id: str, mode: BookingMode, quantity: int) -> BookingRequest:
        record = await self._catalog.by_id(equipment_id)
        return quote(record, mode, quantity)

    async def book(
        self,
        identity: Identity | None,
        *,
        equipment_id: str,
        mode: BookingMode,
        quantity: int,
    ) -> BookingReceipt:
        record = await self._catalog.by_id(equipment_id)
        flow = BookingFlow(record, self._gateway)
        request = flow.select(mode, quantity)
        buyer = flow.confirm(identity)
        payment = await flow.process()

        if mode is BookingMode.RENT:
            self._ledger.record_rental(
                buyer.id,
                record=record,
                days=request.quantity,
                total=request.total,
                order_id=payment.id,
            )
        else:
            self._ledger.record_purchase(
                buyer.id,
                record=record,
                quantity=request.quantity,
                total=request.total,
                order_id=payment.id,
            )
        logger.info(
            "booking_settled",
            user_id=buyer.id,
            equipment_id=record.id,
            mode=mode.value,
            quantity=request.quantity,
            total=request.total,
            payment_id=payment.id,
        )
        return BookingReceipt(
            request=request,
            payment=payment,
            message=flow.success_message(),
            redirect=flow.redirect_to or DASHBOARD_PATH,
        )
