# app/api/routers/healthz.py
from fastapi import APIRouter, Request

from app.schemas.common import OkResponse

router = APIRouter(tags=["health"])


@router.get(
    "/healthz",
    response_model=OkResponse,
    summary="Liveness probe",
    description="単純に200(OK)を返すだけのエンドポイント（DBアクセスなし）",
)
async def healthz():
    return {"ok": True}


@router.get("/health", summary="Health with environment name")
async def health(request: Request):
    settings = request.app.state.services.settings
    return {"status": "ok", "env": settings.app_env}
