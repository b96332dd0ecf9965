from __future__ import annotations

from urllib.parse import urlsplit

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_bearer_token, get_current_identity, get_identity_service
from app.dto import IdentityDTO, SessionDTO
from app.dto.mappers import map_identity, map_session
from app.schemas.auth import ForgotPasswordRequest, SignInRequest, SignUpRequest
from app.schemas.common import ErrorResponse
from app.services.identity import Identity, IdentityService

router = APIRouter(prefix="/auth", tags=["auth"])

DEFAULT_RETURN_PATH = "/"


def _safe_return_path(value: str | None) -> str:
    """Echo back only same-site absolute paths; anything else becomes "/"."""
    if not value or not value.startswith("/"):
        return DEFAULT_RETURN_PATH
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in value):
        return DEFAULT_RETURN_PATH
    # ブラウザはバックスラッシュを "/" として扱う
    normalized = value.replace("\\", "/")
    parts = urlsplit(normalized)
    if normalized.startswith("//") or parts.scheme or parts.netloc:
        return DEFAULT_RETURN_PATH
    return value


@router.post(
    "/signup",
    response_model=SessionDTO,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Create an account and open a session",
)
async def sign_up(payload: SignUpRequest, svc: IdentityService = Depends(get_identity_service)):
    session = await svc.sign_up(
        email=payload.email,
        password=payload.password,
        name=payload.name,
        confirm_password=payload.confirm_password,
    )
    return map_session(session, redirect=DEFAULT_RETURN_PATH)


@router.post(
    "/login",
    response_model=SessionDTO,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="Open a session",
    description="The optional `from` path is echoed back as `redirect` for post-login return.",
)
async def sign_in(payload: SignInRequest, svc: IdentityService = Depends(get_identity_service)):
    session = await svc.sign_in(email=payload.email, password=payload.password)
    return map_session(session, redirect=_safe_return_path(payload.from_))


@router.post("/logout", status_code=204, summary="Close the session (idempotent)")
async def sign_out(
    token: str | None = Depends(get_bearer_token),
    svc: IdentityService = Depends(get_identity_service),
):
    svc.sign_out(token)
    return None


@router.get(
    "/me",
    response_model=IdentityDTO,
    responses={401: {"model": ErrorResponse}},
    summary="Current identity",
)
async def me(identity: Identity | None = Depends(get_current_identity)):
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return map_identity(identity)


@router.post(
    "/forgot-password",
    status_code=202,
    responses={400: {"model": ErrorResponse}},
    summary="Request a password reset link",
)
async def forgot_password(
    payload: ForgotPasswordRequest, svc: IdentityService = Depends(get_identity_service)
):
    await svc.forgot_password(payload.email)
    return {"detail": "Password reset link sent to your email!"}
