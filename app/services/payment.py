"""Simulated payment gateway.

There is no real gateway behind this: processing waits a fixed latency and
always completes.
"""

from __future__ import annotations

import asyncio
import secrets
import time
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Literal

import structlog

PaymentStatus = Literal["pending", "completed", "failed"]


@dataclass(frozen=True)
class PaymentDetails:
    id: str
    amount: int
    currency: str
    description: str
    payment_method: str
    status: PaymentStatus
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


class SimulatedPaymentGateway:
    def __init__(
        self,
        *,
        latency_seconds: float = 2.0,
        currency: str = "INR",
        production: bool = False,
    ) -> None:
        self._latency = max(0.0, latency_seconds)
        self._currency = currency
        self._verify_latency = self._latency / 2
        structlog.get_logger(__name__).info(
            "payment_gateway_initialized", mode="production" if production else "test"
        )

    async def process_payment(
        self,
        *,
        amount: int,
        description: str,
        currency: str | None = None,
        payment_method: str = "card",
    ) -> PaymentDetails:
        await asyncio.sleep(self._latency)
        return PaymentDetails(
            id=f"pmt_{time.time_ns() // 1_000_000}_{secrets.token_hex(3)}",
            amount=amount,
            currency=currency or self._currency,
            description=description,
            payment_method=payment_method,
            status="completed",
        )

    async def verify_payment(self, payment_id: str) -> bool:
        await asyncio.sleep(self._verify_latency)
        return payment_id.startswith("pmt_")
