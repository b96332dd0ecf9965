from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_booking_service, get_current_identity
from app.dto import BookingReceiptDTO
from app.dto.mappers import map_receipt
from app.schemas.booking import BookingCreateRequest
from app.schemas.common import ErrorResponse, LoginRequiredResponse
from app.services.booking import BookingService
from app.services.identity import Identity

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post(
    "",
    response_model=BookingReceiptDTO,
    status_code=201,
    responses={
        401: {"model": LoginRequiredResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Rent or buy equipment",
    description=(
        "Runs selection, identity check and the simulated payment. Without a session the "
        "response is 401 with a redirect to /login that keeps the equipment page as `from`."
    ),
)
async def create_booking(
    payload: BookingCreateRequest,
    identity: Identity | None = Depends(get_current_identity),
    svc: BookingService = Depends(get_booking_service),
):
    receipt = await svc.book(
        identity,
        equipment_id=payload.equipment_id,
        mode=payload.mode,
        quantity=payload.quantity,
    )
    return map_receipt(receipt)
