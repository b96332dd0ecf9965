from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_booking_service, get_catalog_service, get_current_identity
from app.dto import CategoryDTO, EquipmentDTO, QuoteDTO
from app.dto.mappers import map_equipment, map_quote
from app.schemas.booking import QuoteRequest
from app.schemas.common import ErrorResponse
from app.services.booking import BookingService
from app.services.catalog import CatalogService
from app.services.identity import Identity

router = APIRouter(prefix="/equipment", tags=["equipment"])


@router.get(
    "",
    response_model=list[EquipmentDTO],
    responses={400: {"model": ErrorResponse}},
    summary="Search the catalog",
    description=(
        "Case-insensitive substring match on name or description, intersected with "
        "category equality unless category is 'all'. Results keep catalog order."
    ),
)
async def list_equipment(
    q: str | None = Query(None, description="Free-text query", max_length=200),
    category: str = Query("all", description="Category id or 'all'"),
    svc: CatalogService = Depends(get_catalog_service),
):
    return [map_equipment(r) for r in await svc.search(q, category)]


@router.get("/categories", response_model=list[CategoryDTO], summary="Category filter options")
async def list_categories(svc: CatalogService = Depends(get_catalog_service)):
    return [CategoryDTO(id=cid, name=name) for cid, name in svc.categories()]


@router.get("/featured", response_model=list[EquipmentDTO], summary="Featured equipment")
async def list_featured(svc: CatalogService = Depends(get_catalog_service)):
    return [map_equipment(r) for r in await svc.featured()]


@router.get(
    "/category/{category}",
    response_model=list[EquipmentDTO],
    responses={400: {"model": ErrorResponse}},
    summary="Equipment in one category",
)
async def list_by_category(category: str, svc: CatalogService = Depends(get_catalog_service)):
    return [map_equipment(r) for r in await svc.by_category(category)]


@router.get(
    "/{equipment_id}",
    response_model=EquipmentDTO,
    responses={404: {"model": ErrorResponse}},
    summary="Equipment detail",
)
async def get_equipment(
    equipment_id: str,
    svc: CatalogService = Depends(get_catalog_service),
    identity: Identity | None = Depends(get_current_identity),
):
    record = await svc.by_id(equipment_id)
    if identity is not None:
        svc.record_view(identity.id, record.id)
    return map_equipment(record)


@router.post(
    "/{equipment_id}/quote",
    response_model=QuoteDTO,
    responses={404: {"model": ErrorResponse}},
    summary="Price a rent/buy selection",
    description="Quantity below 1 is clamped to 1. The total is recomputed on every call.",
)
async def quote_equipment(
    equipment_id: str,
    payload: QuoteRequest,
    svc: BookingService = Depends(get_booking_service),
):
    return map_quote(await svc.quote(equipment_id, payload.mode, payload.quantity))
