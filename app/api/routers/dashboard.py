from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_current_identity, get_dashboard_service
from app.dto import DashboardDTO
from app.dto.mappers import map_dashboard
from app.schemas.common import LoginRequiredResponse
from app.services.dashboard import DashboardService
from app.services.identity import Identity

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "",
    response_model=DashboardDTO,
    responses={401: {"model": LoginRequiredResponse}},
    summary="Rentals, purchases and recently viewed equipment",
)
async def get_dashboard(
    identity: Identity | None = Depends(get_current_identity),
    svc: DashboardService = Depends(get_dashboard_service),
):
    return map_dashboard(await svc.overview(identity))
