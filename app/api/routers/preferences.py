from __future__ import annotations

from fastapi import APIRouter, Depends, Header

from app.api.deps import get_preference_service
from app.schemas.common import ErrorResponse
from app.schemas.preferences import DEVICE_ID_PATTERN, LanguagePreference
from app.services.preferences import PreferenceService

router = APIRouter(prefix="/preferences", tags=["preferences"])


def _device_id(
    x_device_id: str = Header(
        ...,
        description="Anonymous device ID",
        min_length=8,
        max_length=128,
        pattern=DEVICE_ID_PATTERN,
    ),
) -> str:
    return x_device_id


@router.get("/language", response_model=LanguagePreference, summary="Display language")
async def get_language(
    device_id: str = Depends(_device_id),
    svc: PreferenceService = Depends(get_preference_service),
):
    return LanguagePreference(language=svc.get_language(device_id))


@router.put(
    "/language",
    response_model=LanguagePreference,
    responses={400: {"model": ErrorResponse}},
    summary="Change display language",
)
async def set_language(
    payload: LanguagePreference,
    device_id: str = Depends(_device_id),
    svc: PreferenceService = Depends(get_preference_service),
):
    return LanguagePreference(language=svc.set_language(device_id, payload.language))
